"""该模块提供了目录树的结点 (文件或目录) 及其所有权规则.

    功能简述：
        · 目录拥有 (own) 它的子结点, 删除一个目录会递归地销毁它的整棵子树；
        · 子结点指向父结点的引用只是一个弱引用, 它从来不参与销毁；
"""

# 标准库模块
from enum import Enum
import weakref

# 第三方库模块 (无)

# 自定义模块
from .errors import PathExists, PathIsNotDir, PathNotExists


# 枚举类
class NodeType(Enum):
    """结点类型枚举."""
    IS_FILE = 0
    IS_DIR = 1


# 主类
class Node:
    """目录树中的一个结点, 对应一个文件或一个目录.

    ## 使用示例

    ```python
    root = Node('')
    docs = Node('docs')
    root.add_child(docs)
    docs.add_child(Node('readme.txt', NodeType.IS_FILE))
    print(root.find_child('docs') is docs)  # 输出True.
    ```

    Warnings:
        - `children` 只应该通过 `add_child` 和 `remove_child` 修改, 否则父结点的引用会和它不一致.
        - 同一目录下的子结点名称是唯一的 (不论是文件还是目录).

    Notes:
        - 子结点按照插入的顺序保存, 不做排序.
        - 文件结点的 `children` 永远是空的, 目录结点的 `content` 永远是空的.
    """

    __slots__ = ('name', 'node_type', 'content', 'children', '_parent_ref', '__weakref__')

    def __init__(self, name: str, node_type: NodeType = NodeType.IS_DIR):
        self.name: str = name
        self.node_type: NodeType = node_type
        self.content: str = ''
        self.children: list = []
        self._parent_ref = None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self.name}', {self.node_type})"

    @property
    def parent(self):
        """父结点, 根结点 (或者已经被摘下的结点) 的父结点是None."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def is_dir(self) -> bool:
        return self.node_type is NodeType.IS_DIR

    @property
    def is_file(self) -> bool:
        return self.node_type is NodeType.IS_FILE

    def find_child(self, name: str):
        """按名称 (精确匹配, 区分大小写) 查找子结点, 找不到返回None."""
        for child in self.children:
            if child.name == name:
                return child
        return None

    def add_child(self, node: 'Node') -> None:
        """将一个结点追加为自己的子结点.

        Raises:
            PathIsNotDir: 如果自己是一个文件.
            PathExists: 如果已经有同名的子结点.
        """
        if not self.is_dir:
            raise PathIsNotDir(f"'{self.name}'不是一个目录, 不能拥有子结点")
        if self.find_child(node.name) is not None:
            raise PathExists(f"'{self.name}'中已经存在名为'{node.name}'的结点")
        self.children.append(node)
        node._parent_ref = weakref.ref(self)

    def remove_child(self, node: 'Node') -> None:
        """将一个子结点摘下 (按对象本身而不是按名称).

        Notes:
            * 这里只是摘下, 并不销毁它, 销毁请调用 `destroy`.

        Raises:
            PathNotExists: 如果该结点不是自己的子结点.
        """
        for index, child in enumerate(self.children):
            if child is node:
                del self.children[index]
                node._parent_ref = None
                return
        raise PathNotExists(f"'{node.name}'不是'{self.name}'的子结点")

    def iter_subtree(self):
        """以深度优先的先序 (子结点按插入顺序) 遍历以自己为根的子树.

        Notes:
            * 使用显式的栈而不是递归, 所以很深的目录树也不会超过递归深度的限制.
        """
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def count_subtree(self) -> int:
        """以自己为根的子树中的结点数 (包括自己)."""
        return sum(1 for _ in self.iter_subtree())

    def destroy(self) -> int:
        """以后序 (先子结点, 后自己) 销毁以自己为根的整棵子树.

        Warnings:
            * 调用之前应该先通过父结点的 `remove_child` 把自己摘下来.

        Returns:
            被销毁的结点数.
        """
        destroyed_count = 0
        stack = [(self, False)]
        while stack:
            node, children_visited = stack.pop()
            if children_visited:
                node.children.clear()
                node.content = ''
                node._parent_ref = None
                destroyed_count += 1
            else:
                stack.append((node, True))
                stack.extend((child, False) for child in node.children)
        return destroyed_count
