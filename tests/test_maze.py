import random

import pytest

from algobox.maze import PATH, SOLUTION, WALL, Maze, main


def _generated(rows=7, cols=9, seed=3):
    return Maze.generate(rows, cols, random.Random(seed))


def test_generate_keeps_border_walls_except_openings():
    maze = _generated()
    for r in range(maze.rows):
        for c in range(maze.cols):
            on_border = r in (0, maze.rows - 1) or c in (0, maze.cols - 1)
            if on_border and (r, c) not in (maze.entrance, maze.exit):
                assert maze.cells[r][c] == WALL
    assert maze.cells[0][1] == PATH
    assert maze.cells[maze.rows - 1][maze.cols - 2] == PATH


def test_generate_visits_every_odd_cell_as_a_tree():
    maze = _generated()
    odd_cells = [(r, c) for r in range(1, maze.rows, 2) for c in range(1, maze.cols, 2)]
    assert all(maze.cells[r][c] == PATH for r, c in odd_cells)
    inner_open = sum(
        1
        for r in range(1, maze.rows - 1)
        for c in range(1, maze.cols - 1)
        if maze.cells[r][c] == PATH
    )
    assert inner_open == 2 * len(odd_cells) - 1


def test_generation_is_reproducible_with_seed():
    first = _generated(seed=11).render()
    second = _generated(seed=11).render()
    lines = first.split("\n")
    assert len(lines) == 7
    assert all(len(line) == 9 for line in lines)
    assert lines[0] == WALL + PATH + WALL * 7
    assert second == first


def test_generated_maze_is_solvable():
    maze = _generated()
    assert maze.solve() is True
    assert maze.cells[0][1] == SOLUTION
    assert maze.cells[maze.rows - 2][maze.cols - 2] == SOLUTION


def test_too_small_maze_rejected():
    with pytest.raises(ValueError):
        Maze.generate(2, 5)


def test_solve_hand_made_maze():
    maze = Maze(["# ###", "#   #", "### #"])
    assert maze.solve() is True
    assert maze.render() == "#.###\n#...#\n### #"


def test_blocked_maze_is_left_unchanged():
    layout = ["# ###", "# # #", "### #"]
    maze = Maze(layout)
    assert maze.solve() is False
    assert maze.render() == "\n".join(layout)


def test_ragged_maze_rejected():
    with pytest.raises(ValueError):
        Maze(["###", "#"])


def test_main_prints_both_mazes(capsys):
    assert main(["5", "5", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "Generated Maze:" in out
    assert "Solved Maze:" in out