import pytest

from eightpuzzle.cli import PRESETS, WRONG_INPUT_MESSAGE, format_board, main, preset
from eightpuzzle.solver import GOAL, cells_from_board


def test_first_preset_matches_source_board():
    assert preset(0) == "562031874"


def test_second_preset_matches_source_board():
    assert preset(1) == "123456780"


def test_preset_index_wraps_around():
    assert preset(len(PRESETS)) == preset(0)
    assert preset(-1) == preset(len(PRESETS) - 1)


@pytest.mark.parametrize("index", range(8))
def test_every_preset_is_a_permutation_of_tiles(index):
    assert sorted(preset(index)) == sorted(GOAL)


def test_format_board_of_goal():
    assert format_board(GOAL) == "1 2 3\n8 _ 4\n7 6 5"


@pytest.mark.parametrize("index", range(8))
def test_format_board_round_trips_cells(index):
    state = preset(index)
    tokens = format_board(state).split()
    assert len(format_board(state).splitlines()) == 3
    assert ["" if token == "_" else token for token in tokens] == cells_from_board(state)


def test_main_on_goal_needs_no_steps(capsys):
    code = main(["1", "2", "3", "8", "_", "4", "7", "6", "5"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Solution found:" in out
    assert "Steps: 0" in out
    assert "Nodes: 1" in out


def test_main_one_move_from_goal(capsys):
    code = main(["1", "2", "3", "_", "8", "4", "7", "6", "5"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Solution found:" in out
    assert "Steps: 1" in out
    assert out.index("1 2 3\n_ 8 4\n7 6 5") < out.index("1 2 3\n8 _ 4\n7 6 5")


def test_main_accepts_empty_string_as_blank(capsys):
    code = main(["1", "2", "3", "", "8", "4", "7", "6", "5"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Steps: 1" in out


def test_main_without_blank_falls_back_to_first_preset(capsys):
    code = main(["1", "2", "3", "4", "5", "6", "7", "8", "9"])
    captured = capsys.readouterr()
    assert code == 0
    assert WRONG_INPUT_MESSAGE in captured.err
    assert format_board(preset(0)) in captured.out


def test_main_rejects_wrong_cell_count(capsys):
    code = main(["1", "2", "3"])
    assert code == 2
    assert "expected 9 cells" in capsys.readouterr().err


def test_main_rejects_negative_depth(capsys):
    code = main(["--preset", "0", "--mode", "depth", "--limit", "-1"])
    assert code == 2
    assert "max_depth" in capsys.readouterr().err


def test_main_rejects_unknown_mode():
    with pytest.raises(SystemExit) as excinfo:
        main(["--mode", "sideways"])
    assert excinfo.value.code == 2


def test_main_with_tiny_limit_reports_nearest(capsys):
    code = main(["--preset", "5", "--limit", "2"])
    out = capsys.readouterr().out
    assert code == 0
    assert "No solution within the limit" in out


def test_main_depth_mode_on_preset_four(capsys):
    code = main(["--preset", "4", "--mode", "depth", "--limit", "3"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Solution found:" in out
    assert out.rstrip().endswith("BST levels: " + out.rsplit("BST levels: ", 1)[1].strip())


def test_main_prints_tree_diagram(capsys):
    code = main(["1", "2", "3", "_", "8", "4", "7", "6", "5", "--tree"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Tree Diagram" in out
    assert "Root: 123084765" in out
    assert "Right: 123804765" in out