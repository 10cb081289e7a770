from memory_file_system.tools.simple_ui import run


if __name__ == "__main__":
    """命令行形式 的 ui.
    """

    run()
