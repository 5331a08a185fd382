import random

import pytest

from quadkit.life import CellState, LifeGrid, next_state

A = CellState.ALIVE
D = CellState.DEAD


def grid_with(width, height, alive):
    grid = LifeGrid(width, height)
    for xy in alive:
        grid[xy] = A
    return grid


def alive_cells(grid):
    return {(x, y) for y in range(grid.height) for x in range(grid.width) if grid[x, y] is A}


@pytest.mark.parametrize("n", [0, 1])
def test_underpopulation(n):
    assert next_state(A, n) is D


@pytest.mark.parametrize("n", [2, 3])
def test_survival(n):
    assert next_state(A, n) is A


@pytest.mark.parametrize("n", [4, 5, 8])
def test_overpopulation(n):
    assert next_state(A, n) is D


def test_reproduction():
    assert next_state(D, 3) is A


@pytest.mark.parametrize("n", [0, 2, 4, 8])
def test_dead_stays_dead(n):
    assert next_state(D, n) is D


def test_default_grid_is_dead():
    grid = LifeGrid(4, 3)
    assert len(grid.cells) == 12
    assert all(cell is D for cell in grid.cells)


def test_wrong_cell_count_rejected():
    with pytest.raises(ValueError):
        LifeGrid(2, 2, [D, D, D])


def test_out_of_bounds_access():
    with pytest.raises(IndexError):
        LifeGrid(2, 2)[2, 0]


def test_neighbors_ignore_self_and_edges():
    grid = grid_with(3, 3, [(0, 0), (1, 0), (0, 1), (1, 1)])
    assert grid.neighbors(0, 0) == 3
    assert grid.neighbors(1, 1) == 3


def test_block_is_still_life():
    block = {(1, 1), (2, 1), (1, 2), (2, 2)}
    grid = grid_with(4, 4, block)
    grid.step()
    assert alive_cells(grid) == block


def test_blinker_oscillates():
    horizontal = {(1, 2), (2, 2), (3, 2)}
    vertical = {(2, 1), (2, 2), (2, 3)}
    grid = grid_with(5, 5, horizontal)
    grid.step()
    assert alive_cells(grid) == vertical
    grid.step()
    assert alive_cells(grid) == horizontal


def test_random_grid_is_seeded_and_sized():
    first = LifeGrid.random(10, 6, random.Random(5))
    second = LifeGrid.random(10, 6, random.Random(5))
    assert len(first.cells) == 60
    assert first.cells == second.cells


def test_step_keeps_size():
    grid = LifeGrid.random(7, 5, random.Random(11))
    grid.step()
    assert len(grid.cells) == 35
    assert set(grid.cells) <= {A, D}