"""该模块包含memory_file_system需要的各种异常类；

    功能简述：
        · 所有异常都继承自FileSystemError, 在命令边界处都是可恢复的；
        · “结果为空” (空目录、空文件、没有搜索到) 不是异常, 而是返回空的结果；
"""

__all__ = (
    "FileSystemError",
    "PathExists",
    "PathNotExists",
    "DirOfPathNotExists",
    "PathIsNotDir",
    "PathIsNotFile",
    "InvalidOperation",
    "InvalidRootDirOperation",
    "InvalidNamingConvention",
)

# 导入模块
## 标准库模块
## 第三方库模块
## 自定义模块


class FileSystemError(Exception):
    """该文件系统中的异常的基类；"""

    __slots__ = ('message',)

    def __init__(self, message: str):
        super().__init__(message)

        self.message: str = message

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self.message}')"


class PathExists(FileSystemError):
    """当待创建的路径已经存在时抛出；

    Notes:
        * 同一目录下的文件和目录共享同一个命名空间, 所以同名的文件和目录也会引发该异常；
    """

    __slots__ = ()


class PathNotExists(FileSystemError):
    """当路径不存在时抛出；

    Notes:
        * 该类也是路径不存在的基类；
    """

    __slots__ = ()


class DirOfPathNotExists(PathNotExists):
    """当待创建路径所在的目录不存在时抛出；"""

    __slots__ = ()


class PathIsNotDir(FileSystemError):
    """当路径对应的不是目录时抛出；"""

    __slots__ = ()


class PathIsNotFile(FileSystemError):
    """当路径对应的不是文件时抛出；"""

    __slots__ = ()


class InvalidOperation(FileSystemError):
    """非法操作的基类；

    在一个已经关闭的文件系统上继续操作时也直接抛出它；
    """

    __slots__ = ()


class InvalidRootDirOperation(InvalidOperation):
    """当对根目录“/”进行非法操作时抛出；

    一般来说，只允许对根目录的内容做操作，而不允许对根目录本身做操作 (比如删除它)；
    """

    __slots__ = ()


class InvalidNamingConvention(InvalidOperation):
    """当待创建结点的名称是空字符、“.”或者“..”时抛出；"""

    __slots__ = ()
