import pytest

from memory_file_system.tools.simple_ui import (
    EDIT_END_SENTINEL,
    parse_command_line,
    read_edit_content,
    run,
)


def run_session(lines):
    """用给定的输入行运行一次 ui, 返回所有输出."""
    remaining = iter(lines)
    output = []

    def fake_input(prompt=''):
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    run(input_func=fake_input, output_func=output.append)
    return output


@pytest.mark.parametrize('line, expected', [
    ('mkdir /a', ('mkdir', '/a')),
    ('ls', ('ls', '')),
    ('  cd  spaced', ('cd', ' spaced')),
    ('search my file', ('search', 'my file')),
    ('', ('', '')),
])
def test_parse_command_line(line, expected):
    assert parse_command_line(line) == expected


def test_read_edit_content_stops_at_sentinel():
    lines = iter(['first', '', 'third', EDIT_END_SENTINEL, 'never read'])

    assert read_edit_content(lambda: next(lines)) == 'first\n\nthird\n'
    assert next(lines) == 'never read'


def test_session_walkthrough():
    output = run_session([
        'mkdir /a',
        'mkdir /a/b',
        'touch /a/b/c.txt',
        'cd /a/b',
        'pwd',
        'ls',
        'edit c.txt',
        'hello',
        EDIT_END_SENTINEL,
        'cat c.txt',
        'search c.txt',
        'exit',
        'pwd',
    ])

    assert '目录已创建: /a/b' in output
    assert '文件已创建: /a/b/c.txt' in output
    assert '/a/b' in output
    assert 'c.txt' in output
    assert 'hello\n' in output
    assert '/a/b/c.txt' in output
    assert output[-1] == '退出啦...'


def test_empty_results_are_rendered():
    output = run_session(['', 'ls', 'tree', 'touch f', 'cat f', 'search nothing'])

    assert '(empty)' in output
    assert '/' in output
    assert '(empty file)' in output
    assert 'Not found.' in output


def test_errors_do_not_end_the_session():
    output = run_session(['rm /', 'cd /missing', 'bogus', 'touch x', 'mkdir x', 'pwd'])

    assert sum(line.startswith('Oops!') for line in output) == 3
    assert any('bogus 是一个无效的命令' in line for line in output)
    assert output[-2] == '/'
