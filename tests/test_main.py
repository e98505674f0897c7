import pytest

from main import run


def test_print_start_board(capsys) -> None:
    assert run([]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "r n b q k b n r"


def test_moves_lists_destinations(capsys) -> None:
    assert run(["moves", "b1"]) == 0
    assert capsys.readouterr().out.strip() == "a3 c3"


def test_play_sequence(capsys) -> None:
    assert run(["play", "e2e4", "e7e5", "g1f3"]) == 0
    assert capsys.readouterr().out.strip().endswith("black to move")


def test_play_stops_on_illegal_move(capsys) -> None:
    assert run(["play", "e2e4", "e2e3"]) == 1
    assert "Illegal move: e2e3" in capsys.readouterr().err


def test_bad_square_exits_with_usage_error() -> None:
    with pytest.raises(SystemExit):
        run(["moves", "k9"])
