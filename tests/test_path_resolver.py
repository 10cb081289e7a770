import pytest

from memory_file_system._node import Node, NodeType
from memory_file_system._path_resolver import (
    get_display_path,
    is_absolute_path,
    resolve,
    split_parent_and_name,
    split_path,
)
from memory_file_system.errors import PathNotExists


@pytest.fixture
def tree():
    root = Node('')
    a = Node('a')
    b = Node('b')
    c = Node('c.txt', NodeType.IS_FILE)
    root.add_child(a)
    a.add_child(b)
    b.add_child(c)
    return {'root': root, 'a': a, 'b': b, 'c': c}


@pytest.mark.parametrize('path, expected', [
    ('', []),
    ('/', []),
    ('a', ['a']),
    ('/a/b/', ['a', 'b']),
    ('//a///b', ['a', 'b']),
    ('./a/../b', ['.', 'a', '..', 'b']),
])
def test_split_path_discards_empty_segments(path, expected):
    assert split_path(path) == expected


def test_is_absolute_path():
    assert is_absolute_path('/a')
    assert not is_absolute_path('a/b')
    assert not is_absolute_path('')


@pytest.mark.parametrize('path, expected', [
    ('a/b/c', ('a/b', 'c')),
    ('/c', ('/', 'c')),
    ('c', ('', 'c')),
    ('a/', ('a', '')),
    ('/', ('/', '')),
])
def test_split_parent_and_name(path, expected):
    assert split_parent_and_name(path) == expected


def test_resolve_absolute_and_relative(tree):
    root, a, b = tree['root'], tree['a'], tree['b']

    assert resolve(root, b, '/a', True) == (a, [])
    assert resolve(root, a, 'b/c.txt', True) == (tree['c'], [])
    assert resolve(root, b, '', True) == (b, [])
    assert resolve(root, b, '/', True) == (root, [])


def test_resolve_dot_and_dot_dot(tree):
    root, a, b = tree['root'], tree['a'], tree['b']

    assert resolve(root, b, '..', True) == (a, [])
    assert resolve(root, b, './../b/.', True) == (b, [])
    assert resolve(root, b, '../../../../..', True) == (root, [])
    assert resolve(root, root, '/../a', True) == (a, [])


def test_resolve_must_fully_exist_fails_without_partial_result(tree):
    with pytest.raises(PathNotExists):
        resolve(tree['root'], tree['root'], '/a/missing/b', True)


def test_resolve_returns_leftover_segments(tree):
    root, a = tree['root'], tree['a']

    node, leftover = resolve(root, root, '/a/x/y', False)
    assert node is a
    assert leftover == ['x', 'y']

    node, leftover = resolve(root, root, '/a/b', False)
    assert node is tree['b']
    assert leftover == []


def test_resolve_does_not_descend_into_files(tree):
    root = tree['root']

    with pytest.raises(PathNotExists):
        resolve(root, root, '/a/b/c.txt/anything', True)
    node, leftover = resolve(root, root, '/a/b/c.txt/anything', False)
    assert node is tree['c']
    assert leftover == ['anything']


def test_resolve_is_case_sensitive(tree):
    with pytest.raises(PathNotExists):
        resolve(tree['root'], tree['root'], '/A', True)


def test_display_path(tree):
    assert get_display_path(tree['root']) == '/'
    assert get_display_path(tree['a']) == '/a'
    assert get_display_path(tree['c']) == '/a/b/c.txt'


def test_display_path_round_trips_through_resolve(tree):
    root = tree['root']
    for node in root.iter_subtree():
        assert resolve(root, tree['b'], get_display_path(node), True) == (node, [])
