"""
Testes das primitivas geométricas
"""

import pytest

from wordhunt.core.geometry import (
    ALL_DIRECTIONS,
    E, N, NE, NW, S, SE, SW, W,
    FORWARD_DIRECTIONS,
    Direction,
    cell_id,
    direction_between,
    end_point,
    in_bounds,
    parse_cell_id,
    resolve_direction_set,
    walk,
)


class TestDirections:

    def test_all_has_eight_unique_unit_steps(self):
        assert len(set(ALL_DIRECTIONS)) == 8
        for d in ALL_DIRECTIONS:
            assert max(abs(d.dx), abs(d.dy)) == 1

    def test_forward_is_right_down_diagonal(self):
        assert FORWARD_DIRECTIONS == (E, S, SE)

    def test_names_and_reverse(self):
        assert SE.name == "SE"
        assert E.reversed() == W
        assert NE.reversed() == SW
        assert S.reversed().name == "N"

    def test_resolve_named_sets(self):
        assert resolve_direction_set("all") == ALL_DIRECTIONS
        assert resolve_direction_set("Forward") == FORWARD_DIRECTIONS
        assert resolve_direction_set(None) == FORWARD_DIRECTIONS

    def test_resolve_lists(self):
        assert resolve_direction_set("E, S") == (E, S)
        assert resolve_direction_set(["nw", "NW", "N"]) == (NW, N)
        assert resolve_direction_set([(1, 1), Direction(-1, 0)]) == (SE, W)

    @pytest.mark.parametrize("bad", ["diagonal", ["X"], [(2, 0)], []])
    def test_resolve_rejects_unknown(self, bad):
        with pytest.raises(ValueError):
            resolve_direction_set(bad)


class TestCells:

    def test_cell_id_is_row_first(self):
        assert cell_id(3, 7) == "3-7"
        assert parse_cell_id("3-7") == (3, 7)

    def test_parse_invalid(self):
        with pytest.raises(ValueError):
            parse_cell_id("37")

    def test_bounds(self):
        assert in_bounds(0, 0, 5)
        assert in_bounds(4, 4, 5)
        assert not in_bounds(5, 0, 5)
        assert not in_bounds(0, -1, 5)

    def test_end_point_and_walk(self):
        assert end_point(2, 1, SE, 3) == (4, 3)
        assert end_point(2, 1, N, 3) == (0, 1)
        assert walk(0, 2, SW, 3) == [(0, 2), (1, 1), (2, 0)]

    def test_direction_between(self):
        assert direction_between((0, 0), (0, 4)) == E
        assert direction_between((4, 4), (1, 1)) == NW
        assert direction_between((3, 0), (0, 3)) == NE
        assert direction_between((0, 0), (2, 1)) is None
        assert direction_between((1, 1), (1, 1)) is None
