import pytest

from memory_file_system.memory_file_system import MemoryFileSystem


@pytest.fixture
def mfs():
    with MemoryFileSystem() as file_system:
        yield file_system


@pytest.fixture
def populated_mfs(mfs):
    # /
    # ├── a/
    # │   ├── b/
    # │   │   └── c.txt
    # │   └── notes.txt
    # └── d/
    mfs.mkdir('/a')
    mfs.mkdir('/a/b')
    mfs.touch('/a/b/c.txt')
    mfs.touch('/a/notes.txt')
    mfs.mkdir('/d')
    return mfs
