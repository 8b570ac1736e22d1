import pytest

from sysdemos.perf_loop import (
    COUNTER_LINES,
    DEF_TIMEOUT,
    loop,
    main,
    read_timeout,
    write_counter_file,
)


def test_read_timeout_value(tmp_path):
    path = tmp_path / "timeout.txt"
    path.write_text("  250\n")
    assert read_timeout(path) == 250


@pytest.mark.parametrize("content", ["0", "-3", "junk", ""])
def test_read_timeout_falls_back_to_default(tmp_path, content):
    path = tmp_path / "timeout.txt"
    path.write_text(content)
    assert read_timeout(path) == DEF_TIMEOUT


def test_read_timeout_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_timeout(tmp_path / "absent.txt")


def test_write_counter_file(tmp_path):
    path = tmp_path / "out.txt"
    write_counter_file(path, 3)
    assert path.read_text() == "0\n1\n2\n"


def test_loop_runs_given_iterations(tmp_path):
    timeout = tmp_path / "timeout.txt"
    timeout.write_text("1")
    output = tmp_path / "tmp.txt"
    assert loop(timeout, output, 2) == 2
    lines = output.read_text().splitlines()
    assert len(lines) == COUNTER_LINES
    assert lines[-1] == str(COUNTER_LINES - 1)


def test_main_reports_missing_timeout_file(tmp_path, capsys):
    missing = tmp_path / "absent.txt"
    code = main(["--timeout-file", str(missing), "--output", str(tmp_path / "o.txt"), "--iterations", "1"])
    assert code == 1
    assert str(missing) in capsys.readouterr().out