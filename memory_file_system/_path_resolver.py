"""该模块提供了路径字符串和目录树结点之间的相互转换.

    功能简述：
        · 把路径拆分成段 (`split_path`)；
        · 把路径解析成结点 (`resolve`), 支持绝对路径、相对路径以及“.”和“..”；
        · 由结点得到它的规范的绝对路径 (`get_display_path`)；
"""

# 标准库模块 (无)

# 第三方库模块 (无)

# 自定义模块
from ._node import Node
from .errors import PathNotExists

# 用于设置的全局变量
PATH_SEPARATOR = '/'  # 路径分隔符.
CURRENT_DIR = '.'  # 表示当前目录的段.
PARENT_DIR = '..'  # 表示上一级目录的段.


def split_path(path: str) -> list:
    """把路径按“/”拆分成段, 丢弃由开头、结尾或者相邻的“/”产生的空段.

    Notes:
        * 该函数不会失败, 空路径得到空列表 (表示起始结点本身).
    """
    return [segment for segment in path.split(PATH_SEPARATOR) if segment]


def is_absolute_path(path: str) -> bool:
    """以“/”开头的是绝对路径, 其他的 (包括空路径) 都是相对于当前目录的路径."""
    return path.startswith(PATH_SEPARATOR)


def split_parent_and_name(path: str) -> tuple:
    """在最后一个“/”处把路径分成 (所在目录的路径, 结点名称).

    Examples:
        * 'a/b/c' -> ('a/b', 'c')
        * '/c' -> ('/', 'c')
        * 'c' -> ('', 'c'), 即所在目录为当前目录.
    """
    pos = path.rfind(PATH_SEPARATOR)
    if pos == -1:
        return '', path
    if pos == 0:
        return PATH_SEPARATOR, path[1:]
    return path[:pos], path[pos + 1:]


def resolve(root: Node, current_dir: Node, path: str, must_fully_exist: bool = True) -> tuple:
    """把路径解析成结点.

    绝对路径从根目录开始, 相对路径从当前目录开始, 按顺序处理每一段:
    “.”不动, “..”走到父结点 (在根目录时留在根目录), 其他名称则精确匹配一个子结点.

    Notes:
        * 文件没有子结点, 所以文件之后的名称段是不可能解析成功的.
        * 当 `must_fully_exist` 为False时, 返回的剩余段列表为空表示该路径完全存在;
          不为空表示到返回的结点为止都是存在的, 而剩余段 (从第一个不存在的段开始) 不存在.

    Args:
        root: 根结点.
        current_dir: 当前目录结点.
        path: 待解析的路径.
        must_fully_exist: 路径是否必须完全存在.

    Returns:
        (结点, 剩余段列表) 的二元组.

    Raises:
        PathNotExists: 如果 `must_fully_exist` 为True而该路径不存在.
    """
    current = root if is_absolute_path(path) else current_dir
    segments = split_path(path)
    for index, segment in enumerate(segments):
        if segment == CURRENT_DIR:
            continue
        if segment == PARENT_DIR:
            if current.parent is not None:
                current = current.parent
            continue
        child = current.find_child(segment)
        if child is None:
            if must_fully_exist:
                raise PathNotExists(f"路径'{path}'不存在")
            return current, segments[index:]
        current = child
    return current, []


def get_display_path(node: Node) -> str:
    """沿着父结点走到根目录, 得到该结点的规范的绝对路径 (根目录为“/”)."""
    names = []
    while node.parent is not None:
        names.append(node.name)
        node = node.parent
    names.reverse()
    return PATH_SEPARATOR + PATH_SEPARATOR.join(names)
