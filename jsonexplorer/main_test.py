import io
import os
import tempfile
from contextlib import redirect_stdout, redirect_stderr

from jsonexplorer.__main__ import main


def run(argv):
    stdout, stderr = io.StringIO(), io.StringIO()
    with redirect_stdout(stdout), redirect_stderr(stderr):
        code = main(argv)
    return code, stdout.getvalue(), stderr.getvalue()


def write_tmp(text):
    fd, path = tempfile.mkstemp(suffix='.json')
    with os.fdopen(fd, 'w', encoding='utf-8') as file:
        file.write(text)
    return path


def test_demo():
    code, stdout, _ = run([])
    assert code == 0
    assert 'JSON parsed successfully!' in stdout
    assert 'store: Object' in stdout, stdout
    assert 'Common JSONPath Patterns:' in stdout
    assert 'Found 3 matches:' in stdout, stdout
    assert 'Book 2' in stdout


def test_file_and_query():
    path = write_tmp('{"items": [1, 2, 3, 4, 5, 6, 7]}')
    try:
        code, stdout, _ = run([path, '-q', '$.items[*]', '--max-matches', '3'])
    finally:
        os.remove(path)
    assert code == 0
    assert 'items: Array (7 items)' in stdout, stdout
    assert '... and 4 more matches' in stdout, stdout
    assert 'Common JSONPath Patterns:' not in stdout


def test_invalid_json():
    path = write_tmp('{"a": ')
    try:
        code, _, stderr = run([path])
    finally:
        os.remove(path)
    assert code == 1
    assert 'Invalid JSON' in stderr, stderr


def test_invalid_query():
    code, _, stderr = run(['-q', '$.[invalid'])
    assert code == 0
    assert 'Error in JSON path' in stderr, stderr

    code, _, stderr = run(['-q', '$.[invalid', '--strict'])
    assert code == 1
    assert 'Error in JSON path' in stderr, stderr


if __name__ == '__main__':
    test_demo()
    test_file_and_query()
    test_invalid_json()
    test_invalid_query()
