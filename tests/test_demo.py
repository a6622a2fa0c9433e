import pytest

from chainlist.demo import format_values, main


def test_format_empty_is_null():
    assert format_values([]) == "NULL"


def test_format_values_pins_layout():
    assert format_values([1, 2]) == "1 -> 2 -> NULL"


def test_format_accepts_generators():
    assert format_values(x for x in (3, 4)) == format_values([3, 4])


def test_deque_demo_output(capsys):
    assert main(["--demo", "deque"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == format_values(range(5))
    assert lines[1] == "5"
    assert lines[2] == "head = 0"
    assert lines[3] == "tail = 4"
    assert lines[4] == format_values(range(1, 4))
    assert len(lines) == 5


def test_linked_demo_output(capsys):
    assert main(["--demo", "linked"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        format_values([3, 4, 5, 6]),
        format_values([3, 4, 5, 6, 2, 1]),
    ]


def test_all_runs_both(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 7
    assert lines[-1] == format_values([3, 4, 5, 6, 2, 1])


def test_unknown_demo_rejected():
    with pytest.raises(SystemExit) as info:
        main(["--demo", "nothing"])
    assert info.value.code == 2