"""提供简单的使用文件系统的命令行 ui"""

# 标准库模块
import logging
import os

# 第三方库模块
# 自定义模块
from ..errors import FileSystemError
from ..memory_file_system import MemoryFileSystem

# 用于设置的全局变量
COMMAND_SET = ('mkdir', 'touch', 'cat', 'edit', 'rm', 'cd', 'ls', 'pwd', 'tree', 'search', 'help', 'exit')
EDIT_END_SENTINEL = 'END'  # edit 命令中表示输入结束的行.
LOG_LEVEL_ENV = 'MEMORY_FS_LOG_LEVEL'  # 设置日志级别的环境变量名.
DEFAULT_LOG_LEVEL = 'WARNING'

HELP_TEXT = (
    "支持的命令:\n"
    " mkdir <path>\n"
    " touch <path>\n"
    " cat <file>\n"
    f" edit <file>  (逐行输入新内容, 单独一行 {EDIT_END_SENTINEL} 表示结束)\n"
    " rm <path>\n"
    " cd <path>\n"
    " ls [path]\n"
    " pwd\n"
    " tree [path]\n"
    " search <name>\n"
    " help\n"
    " exit"
)


def parse_command_line(line: str) -> tuple:
    """把一行输入拆分成 (命令, 参数), 参数是命令之后的原始字符串 (去掉一个前导空格)."""
    line = line.lstrip()
    command, _, argument = line.partition(' ')
    return command, argument


def read_edit_content(input_func) -> str:
    """逐行读取新内容直到遇到结束行, 每一行都以换行符结尾."""
    lines = []
    while True:
        line = input_func()
        if line == EDIT_END_SENTINEL:
            break
        lines.append(line + '\n')
    return ''.join(lines)


def configure_logging() -> None:
    level_name = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(asctime)s %(levelname)s (%(name)s) %(message)s",
    )


def execute_command(mfs: MemoryFileSystem, command: str, argument: str, input_func, output_func) -> None:
    """执行一条命令并输出结果.

    Raises:
        FileSystemError: 由文件系统的操作抛出, 交给调用者处理.
    """
    if command == 'help':
        output_func(HELP_TEXT)
    elif command == 'mkdir':
        output_func(f"目录已创建: {mfs.mkdir(argument)}")
    elif command == 'touch':
        output_func(f"文件已创建: {mfs.touch(argument)}")
    elif command == 'cat':
        content = mfs.cat(argument)
        output_func(f"----- {argument} -----")
        output_func(content if content else "(empty file)")
        output_func("-----------------------")
    elif command == 'edit':
        mfs.cat(argument)  # 先确认它是一个存在的文件, 再读取新内容.
        output_func(f"输入新内容 (单独一行 {EDIT_END_SENTINEL} 表示结束):")
        mfs.edit(argument, read_edit_content(input_func))
        output_func("文件已更新.")
    elif command == 'rm':
        mfs.rm(argument)
        output_func("已删除.")
    elif command == 'cd':
        mfs.cd(argument)
    elif command == 'ls':
        names = mfs.ls(argument)
        output_func('  '.join(names) if names else "(empty)")
    elif command == 'pwd':
        output_func(mfs.pwd())
    elif command == 'tree':
        for line in mfs.iter_tree_lines(argument):
            output_func(line)
    elif command == 'search':
        results = mfs.search(argument)
        if not results:
            output_func("Not found.")
        for result in results:
            output_func(result)
    else:
        output_func(f"{command} 是一个无效的命令.\n支持的命令: {COMMAND_SET}")


def run(input_func=input, output_func=print) -> None:
    # 使用推荐的with（上下文资源管理器）, 退出时整棵目录树会被销毁.
    configure_logging()
    with MemoryFileSystem() as mfs:
        output_func("内存文件系统模拟器")
        output_func(HELP_TEXT)
        while True:
            try:
                # 输入命令
                line = input_func(f"{mfs.pwd()} $ ")
            except EOFError:
                break
            command, argument = parse_command_line(line)
            if not command:
                continue
            # 是否要退出
            if command == 'exit':
                break
            try:
                execute_command(mfs, command, argument, input_func, output_func)
            except FileSystemError as e:
                output_func(f"Oops! 粗错啦: {e}")
            except EOFError:
                break
    output_func("退出啦...")
