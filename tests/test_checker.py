import io

import pytest

from pushswap.checker import (
    InstructionError,
    check,
    main,
    parse_instruction,
    run_instructions,
)
from pushswap.sorting import solve
from pushswap.stacks import Op


def test_parse_instruction_reads_names():
    assert parse_instruction("sa\n") is Op.SA
    assert parse_instruction("rrr\n") is Op.RRR


@pytest.mark.parametrize("line", ["sa", "xx\n", "\n", "", "sa \n", "ra\r\n"])
def test_parse_instruction_rejects_bad_lines(line):
    with pytest.raises(InstructionError):
        parse_instruction(line)


def test_run_instructions_applies_in_order():
    stacks = run_instructions([2, 1, 3], ["sa\n", "pb\n"])
    assert stacks.stack_a == [2, 3]
    assert stacks.stack_b == [1]
    assert stacks.ops == []


def test_run_instructions_stops_on_bad_line():
    with pytest.raises(InstructionError):
        run_instructions([2, 1], ["sa\n", "nope\n"])


@pytest.mark.parametrize("values", [[3, 2, 1], [5, 1, 4, 2, 3], list(range(30, 0, -1))])
def test_solution_checks_out(values):
    lines = [f"{op}\n" for op in solve(values)]
    assert check(values, lines) is True


def test_unsorted_without_instructions_fails():
    assert check([2, 1], []) is False


def test_main_prints_ok(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("sa\n"))
    assert main(["2", "1"]) == 0
    assert capsys.readouterr().out == "OK\n"


def test_main_prints_ko(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("ra\n"))
    assert main(["3", "2", "1"]) == 0
    assert capsys.readouterr().out == "KO\n"


def test_main_bad_instruction_reports_error(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("sa\nfoo\n"))
    assert main(["2", "1"]) == 0
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_main_bad_numbers_report_error(capsys):
    assert main(["1", "1"]) == 0
    assert capsys.readouterr().err == "Error\n"


def test_main_sorted_input_is_ok_without_reading(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("garbage\n"))
    assert main(["1 2 3"]) == 1
    assert capsys.readouterr().out == "OK\n"


def test_main_no_arguments(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == ""