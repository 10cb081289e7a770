"""该模块提供了一个完全保存在内存中的, 支持 *单用户*, *单会话* 的层次化文件系统.
    Warning:
        - 最好使用 `with` 来使用该类的对象, 这样退出时整棵目录树会被销毁.
        - **不支持** 并发, 也 **不支持** 持久化, 进程结束 (或者会话关闭) 后所有内容都会丢失.
"""

# 标准库模块
import logging

# 第三方库模块 (无)

# 自定义模块
from ._node import Node, NodeType
from ._path_resolver import (
    CURRENT_DIR,
    PARENT_DIR,
    PATH_SEPARATOR,
    get_display_path,
    resolve,
    split_parent_and_name,
)
from .errors import (
    DirOfPathNotExists,
    InvalidNamingConvention,
    InvalidOperation,
    InvalidRootDirOperation,
    PathExists,
    PathIsNotDir,
    PathIsNotFile,
)

_LOGGER = logging.getLogger(__name__)

# 用于设置的全局变量
ROOT_NAME = ''  # 根目录的名称 (显示为“/”).
TREE_BRANCH = '├── '  # 树形打印中非最后一个子结点的连接符.
TREE_LAST_BRANCH = '└── '  # 树形打印中最后一个子结点的连接符.
TREE_PIPE = '│   '  # 树形打印中非最后一个子结点下方的缩进.
TREE_SPACE = '    '  # 树形打印中最后一个子结点下方的缩进.


# 主类
class MemoryFileSystem:
    """该类提供一个完全保存在内存中的层次化文件系统.

    ## 使用示例

    用法:

    ```python
    with MemoryFileSystem() as mfs:
        mfs.mkdir('/docs')
        mfs.touch('/docs/readme.txt')
        mfs.cd('docs')
        mfs.edit('readme.txt', 'hello')
        print(mfs.cat('readme.txt'))  # 输出hello.
        # 做一些其他的事儿...
    ```

    和用法:

    ```python
    try:
        mfs = MemoryFileSystem()
        mfs.mkdir('/docs')
        # 做一些其他的事儿...
    except FileSystemError as e:
        # 处理异常
    finally:
        mfs.close()
    ```

    是等价的.

    ## Notes:
        - 放在最前面:
            - 每个实例都是一个独立的会话, 它有自己的根目录和自己的“当前目录”.
            - **不支持** 并行.
        - 路径采用 `Unix 形式`, 以“/”开头的是绝对路径, 否则是相对于“当前目录”的路径, 支持“.”和“..”.
        - 创建操作是 **非覆盖式** 的, 这意味着如果目标路径存在会抛出异常.
        - 所有的创建操作, 默认 **最后一项** 是待创建的名称, 它之前的部分必须是一个已经存在的目录.
        - 每个操作都是先检查后修改的, 所以抛出异常时目录树是没有被修改的.
        - 结果为空 (空目录、空文件、没有搜索到) 不是异常, 返回的是空的列表或空字符串.
        - 删除“当前目录”或者它的祖先目录是允许的, 此时“当前目录”会回到被删除结点的父目录.
    """

    # 内部使用的方法
    def __init__(self):
        """创建一个只有根目录的文件系统, “当前目录”为根目录."""
        self._root = Node(ROOT_NAME, NodeType.IS_DIR)
        self._current_dir = self._root
        self._closed = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        """在退出前销毁整棵目录树."""
        self.close()

    def __check_open(self) -> None:
        """检查该文件系统是否还能使用.

        Raises:
            InvalidOperation: 如果该文件系统已经关闭了.
        """
        if self._closed:
            raise InvalidOperation("该文件系统已经关闭了")

    def __resolve(self, path: str) -> Node:
        """解析一个必须完全存在的路径.

        Raises:
            PathNotExists: 如果该路径不存在.
        """
        self.__check_open()
        node, _ = resolve(self._root, self._current_dir, path, must_fully_exist=True)
        return node

    def __resolve_file(self, path: str) -> Node:
        """解析一个必须是文件的路径.

        Raises:
            PathNotExists: 如果该路径不存在.
            PathIsNotFile: 如果该路径存在但不对应一个文件 (而是一个目录).
        """
        node = self.__resolve(path)
        if not node.is_file:
            raise PathIsNotFile(f"路径'{path}'存在但不对应一个文件 (而是一个目录)")
        return node

    def __resolve_dir(self, path: str) -> Node:
        """解析一个必须是目录的路径.

        Raises:
            PathNotExists: 如果该路径不存在.
            PathIsNotDir: 如果该路径存在但不对应一个目录.
        """
        node = self.__resolve(path)
        if not node.is_dir:
            raise PathIsNotDir(f"路径'{path}'存在但不对应一个目录")
        return node

    def __create_node(self, path: str, node_type: NodeType = NodeType.IS_DIR) -> str:
        """创建一个结点 (非覆盖式的).

        Args:
            path: 指定创建结点的路径, 最后一项是待创建的名称.
            node_type: 待创建结点的类型.

        Returns:
            新结点的绝对路径.

        Raises:
            InvalidNamingConvention: 如果待创建结点的名称是空的, 或者是“.”、“..”.
            DirOfPathNotExists: 如果该路径所在的目录是不存在的.
            PathExists: 如果该路径已经存在 (不论是文件还是目录).
        """
        # 条件检查.
        self.__check_open()
        parent_path, name = split_parent_and_name(path)
        if not name:  # 待创建的结点名称不能是空的.
            raise InvalidNamingConvention("待创建结点的名称不能是空的")
        if name in (CURRENT_DIR, PARENT_DIR):  # 这样的名称之后是无法被访问到的.
            raise InvalidNamingConvention(f"待创建结点的名称不能是'{name}'")
        parent, leftover = resolve(self._root, self._current_dir, parent_path, must_fully_exist=False)
        if leftover or not parent.is_dir:
            raise DirOfPathNotExists(f"路径'{path}'所在的目录不存在")
        if parent.find_child(name) is not None:
            raise PathExists(f"路径'{path}'已经存在, 不能覆盖它")

        node = Node(name, node_type)
        parent.add_child(node)
        display_path = get_display_path(node)
        _LOGGER.debug("Created %s %s", node_type.name, display_path)
        return display_path

    # 提供给外部的方法
    def close(self) -> None:
        """以后序销毁整棵目录树, 之后该实例不能再被使用.

        Notes:
            * 重复调用是没有问题的.
        """
        if self._closed:
            return
        destroyed_count = self._root.destroy()
        self._current_dir = self._root
        self._closed = True
        _LOGGER.debug("Closed file system, destroyed %s nodes", destroyed_count)

    def pwd(self) -> str:
        """返回当前目录的绝对路径."""
        return get_display_path(self._current_dir)

    def is_path_exists(self, path: str) -> bool:
        """查询指定路径的文件或目录是否存在."""
        self.__check_open()
        _, leftover = resolve(self._root, self._current_dir, path, must_fully_exist=False)
        return not leftover

    def is_dir(self, path: str) -> bool:
        """判断指定路径对应的是否是目录.

        Raises:
            PathNotExists: 如果该路径不存在.
        """
        return self.__resolve(path).is_dir

    def count_nodes(self) -> int:
        """整棵目录树中的结点数 (包括根目录)."""
        self.__check_open()
        return self._root.count_subtree()

    def cd(self, dir_path: str) -> str:
        """切换当前目录.

        Notes:
            * 即使抛出异常, “当前目录”也是不变的.
            * 在根目录执行“cd ..”仍然在根目录.

        Returns:
            新的当前目录的绝对路径.

        Raises:
            PathNotExists: 如果该路径不存在.
            PathIsNotDir: 如果该路径存在但不对应一个目录.
        """
        self._current_dir = self.__resolve_dir(dir_path)
        current_dir_path = self.pwd()
        _LOGGER.debug("Changed current directory to %s", current_dir_path)
        return current_dir_path

    def ls(self, dir_path: str = '') -> list:
        """查看指定目录 (默认为当前目录) 的内容.

        Returns:
            按字典序排好的名称列表, 其中目录名以“/”结尾. 空目录返回空列表.

        Raises:
            PathNotExists: 如果该路径不存在.
            PathIsNotDir: 如果该路径存在但不对应一个目录.
        """
        node = self.__resolve_dir(dir_path)
        return sorted(
            child.name + PATH_SEPARATOR if child.is_dir else child.name
            for child in node.children
        )

    def cat(self, file_path: str) -> str:
        """查看指定文件的内容 (空文件返回空字符串).

        Raises:
            PathNotExists: 如果该路径不存在.
            PathIsNotFile: 如果该路径存在但不对应一个文件 (而是一个目录).
        """
        return self.__resolve_file(file_path).content

    def edit(self, file_path: str, content: str) -> None:
        """用新的内容整个地替换指定文件的内容 (覆盖式的, 不是追加).

        Raises:
            PathNotExists: 如果该路径不存在.
            PathIsNotFile: 如果该路径存在但不对应一个文件 (而是一个目录).
        """
        node = self.__resolve_file(file_path)
        node.content = content
        _LOGGER.debug("Updated %s (%s characters)", get_display_path(node), len(content))

    def mkdir(self, path: str) -> str:
        """创建一个目录 (非覆盖式的).

        Notes:
            * 这里的异常处理实际上是self.__create_node的.

        Returns:
            新目录的绝对路径.

        Raises:
            InvalidNamingConvention: 如果待创建结点的名称是空的, 或者是“.”、“..”.
            DirOfPathNotExists: 如果该路径所在的目录是不存在的.
            PathExists: 如果该路径已经存在.
        """
        return self.__create_node(path, NodeType.IS_DIR)

    def touch(self, path: str) -> str:
        """创建一个空文件 (非覆盖式的).

        Notes:
            * 这里的异常处理实际上是self.__create_node的.

        Returns:
            新文件的绝对路径.

        Raises:
            InvalidNamingConvention: 如果待创建结点的名称是空的, 或者是“.”、“..”.
            DirOfPathNotExists: 如果该路径所在的目录是不存在的.
            PathExists: 如果该路径已经存在.
        """
        return self.__create_node(path, NodeType.IS_FILE)

    def rm(self, path: str) -> int:
        """删除一个文件或目录 (目录会连同它的所有内容一起删除).

        Notes:
            * 如果“当前目录”在被删除的子树中, “当前目录”会回到被删除结点的父目录.

        Returns:
            被删除的结点数.

        Raises:
            PathNotExists: 如果该路径不存在.
            InvalidRootDirOperation: 如果该路径是根目录.
        """
        # 条件检查.
        node = self.__resolve(path)
        if node is self._root:
            raise InvalidRootDirOperation("不能删除根目录")

        parent = node.parent
        display_path = get_display_path(node)
        # 先把“当前目录”移出待删除的子树.
        ancestor = self._current_dir
        while ancestor is not None:
            if ancestor is node:
                self._current_dir = parent
                _LOGGER.debug("Current directory reset to %s", get_display_path(parent))
                break
            ancestor = ancestor.parent
        parent.remove_child(node)
        removed_count = node.destroy()
        _LOGGER.debug("Removed %s (%s nodes)", display_path, removed_count)
        return removed_count

    def iter_tree_lines(self, dir_path: str = ''):
        """以深度优先的先序逐行生成指定目录 (默认为当前目录) 的树形表示.

        Notes:
            * 子结点按插入顺序 (而不是字典序) 排列, 这和 `ls` 不同.
            * 遍历的根结点没有前缀, 根目录显示为“/”, 其他目录显示为“名称/”.
            * 路径在调用时就被解析了, 所以异常在调用时 (而不是迭代时) 抛出.

        Raises:
            PathNotExists: 如果该路径不存在.
            PathIsNotDir: 如果该路径存在但不对应一个目录.
        """
        top = self.__resolve_dir(dir_path)
        return self.__iter_tree_lines(top)

    def __iter_tree_lines(self, top: Node):
        yield PATH_SEPARATOR if top is self._root else top.name + PATH_SEPARATOR
        # 栈中的元素是 (结点, 前缀, 是否是最后一个子结点).
        stack = self.__child_entries(top, TREE_SPACE)
        while stack:
            node, prefix, is_last = stack.pop()
            line = prefix + (TREE_LAST_BRANCH if is_last else TREE_BRANCH) + node.name
            yield line + PATH_SEPARATOR if node.is_dir else line
            stack.extend(self.__child_entries(node, prefix + (TREE_SPACE if is_last else TREE_PIPE)))

    @staticmethod
    def __child_entries(node: Node, prefix: str) -> list:
        """按逆序生成子结点的栈元素, 这样出栈的顺序就是插入顺序."""
        last_index = len(node.children) - 1
        return [
            (child, prefix, index == last_index)
            for index, child in reversed(list(enumerate(node.children)))
        ]

    def tree(self, dir_path: str = '') -> str:
        """返回指定目录 (默认为当前目录) 的树形表示."""
        return '\n'.join(self.iter_tree_lines(dir_path))

    def search(self, name: str) -> list:
        """从根目录 (而不是当前目录) 开始查找所有名称恰好为 `name` 的文件和目录.

        Returns:
            匹配结点的绝对路径列表, 其中目录以“/”结尾. 没有找到时返回空列表.
        """
        self.__check_open()
        if not name:  # 根目录的空名称不是一个可以查找的名称.
            return []
        return [
            get_display_path(node) + PATH_SEPARATOR if node.is_dir else get_display_path(node)
            for node in self._root.iter_subtree()
            if node.name == name
        ]
