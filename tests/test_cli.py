import io

import pytest

from pushswap.cli import main
from pushswap.stacks import Stacks


def _replay(values, text):
    stacks = Stacks(values, out=io.StringIO())
    for move in text.split():
        getattr(stacks, move)()
    return stacks


def test_no_arguments_is_error(capsys):
    assert main([]) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_single_empty_argument_is_error(capsys):
    assert main([""]) == 1
    assert capsys.readouterr().err == "Error\n"


def test_separate_arguments(capsys):
    assert main(["3", "2", "1"]) == 0
    assert capsys.readouterr().out == "ra\nsa\n"


def test_single_quoted_argument(capsys):
    assert main(["3 2 1"]) == 0
    assert capsys.readouterr().out == "ra\nsa\n"


def test_blank_single_argument_prints_nothing(capsys):
    assert main(["    "]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_sorted_input_prints_nothing(capsys):
    assert main(["1", "2", "3", "4"]) == 0
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize(
    "argv",
    [["1", "1"], ["1", ""], ["5 3 x"], ["2147483648"], ["1", "+2"], ["01", "2"], ["4 4"]],
)
def test_invalid_input_is_error(argv, capsys):
    assert main(argv) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_output_sorts_the_input(capsys):
    values = [12, -3, 40, 7, 0, 25, -18, 9, 3]
    assert main([str(value) for value in values]) == 0
    stacks = _replay(values, capsys.readouterr().out)
    assert list(stacks.a) == sorted(values)
    assert not stacks.b


def test_quoted_output_matches_separate_output(capsys):
    values = ["6", "-1", "4", "10", "2"]
    main(values)
    separate = capsys.readouterr().out
    main([" ".join(values)])
    assert capsys.readouterr().out == separate