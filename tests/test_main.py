import pytest

import main
from canvas_tictactoe.game_logic import Cell


def test_defaults():
    args = main.parse_args([])
    assert args.size == 300
    assert args.first == "random"
    assert args.log_level == "WARNING"


def test_build_controller_with_fixed_first_mark():
    ctl = main.build_controller(main.parse_args(["--size", "210", "--first", "circle"]))
    assert ctl.first_mark is Cell.CIRCLE
    assert ctl.mapper.cell_width == pytest.approx(70)
    assert ctl.mapper.cell_at(100, 10) == (0, 1)


def test_seed_makes_first_mark_repeatable():
    argv = ["--seed", "42"]
    first = main.build_controller(main.parse_args(argv)).first_mark
    assert all(main.build_controller(main.parse_args(argv)).first_mark is first
               for _ in range(3))


@pytest.mark.parametrize("argv", [["--size", "2"], ["--first", "triangle"], ["--size", "big"]])
def test_bad_options_exit(argv):
    with pytest.raises(SystemExit) as exc:
        main.parse_args(argv)
    assert exc.value.code == 2
