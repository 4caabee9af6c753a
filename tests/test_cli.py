import pytest

from tic_tac_toe_engine.__main__ import describe_outcome, main
from tic_tac_toe_engine.board import Player
from tic_tac_toe_engine.game import Draw, NoChange, Switch, Win


class TestCli:
    """Test the move replay command line driver."""

    def test_replay_win(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["0,0", "1,0", "0,1", "1,1", "0,2"])

        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            "0,0 -> Switch",
            "1,0 -> Switch",
            "0,1 -> Switch",
            "1,1 -> Switch",
            "0,2 -> Win(X)",
            "X wins: 1, O wins: 0, draws: 0",
        ]

    def test_moves_after_end_are_rejected(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["0,0", "1,0", "0,1", "1,1", "0,2", "2,2"])

        lines = capsys.readouterr().out.splitlines()
        assert lines[-2] == "2,2 -> NoChange"

    def test_reset_after_end_accumulates_record(self, capsys: pytest.CaptureFixture[str]) -> None:
        x_win = ["0,0", "1,0", "0,1", "1,1", "0,2"]
        draw = ["0,0", "1,0", "2,0", "2,1", "0,1", "0,2", "1,1", "2,2", "1,2"]

        main(["--reset-after-end", *x_win, *draw, *x_win])

        lines = capsys.readouterr().out.splitlines()
        assert lines[-1] == "X wins: 2, O wins: 0, draws: 1"

    def test_out_of_bounds_move(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["3,0", "0,3", "0,0"])

        lines = capsys.readouterr().out.splitlines()
        assert lines[:3] == ["3,0 -> NoChange", "0,3 -> NoChange", "0,0 -> Switch"]

    def test_no_moves(self, capsys: pytest.CaptureFixture[str]) -> None:
        main([])

        assert capsys.readouterr().out == "X wins: 0, O wins: 0, draws: 0\n"

    @pytest.mark.parametrize("token", ["0", "0,0,0", "a,b", "1;1"])
    def test_malformed_move_exits(self, token: str, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([token])

        assert exc_info.value.code == 2
        assert "Invalid move" in capsys.readouterr().err

    def test_describe_outcome(self) -> None:
        assert describe_outcome(Win(Player.O)) == "Win(O)"
        assert describe_outcome(Draw()) == "Draw"
        assert describe_outcome(Switch()) == "Switch"
        assert describe_outcome(NoChange()) == "NoChange"
