"""Tests for the precomputed ray table."""

import pytest

from chessray.core.enums import Color, Role
from chessray.core.rays import RayTable, RayTableNotBuiltError, get_ray
from chessray.core.types import A1, A8, B2, D4, E2, E4, E7, E5, H1, H8, all_squares


class TestGeometryInvariants:
    @pytest.mark.parametrize("role", list(Role))
    @pytest.mark.parametrize("color", list(Color))
    def test_rays_stay_on_board_without_repeats(
        self, table: RayTable, role: Role, color: Color
    ) -> None:
        for sq in all_squares():
            seen: set[tuple[int, int]] = set()
            for ray in table.rays(role, color, sq):
                for row, col in ray:
                    assert 0 <= row < 8 and 0 <= col < 8
                    assert (row, col) != sq
                    assert (row, col) not in seen
                    seen.add((row, col))

    @pytest.mark.parametrize("color", list(Color))
    def test_capture_rays_single_square_on_board(
        self, table: RayTable, color: Color
    ) -> None:
        for sq in all_squares():
            for ray in table.capture_rays(color, sq):
                assert len(ray) == 1
                row, col = ray[0]
                assert 0 <= row < 8 and 0 <= col < 8


class TestSliders:
    def test_rook_from_corner(self, table: RayTable) -> None:
        rays = table.rays(Role.ROOK, Color.WHITE, A1)
        lengths = sorted(len(r) for r in rays)
        assert lengths == [0, 0, 7, 7]

    def test_rays_ordered_nearest_first(self, table: RayTable) -> None:
        rays = table.rays(Role.ROOK, Color.WHITE, A1)
        up = next(r for r in rays if r and r[0] == (6, 0))
        assert up == tuple((row, 0) for row in range(6, -1, -1))
        assert up[-1] == A8

    def test_bishop_long_diagonal(self, table: RayTable) -> None:
        rays = table.rays(Role.BISHOP, Color.BLACK, H1)
        assert any(ray and ray[-1] == A8 and len(ray) == 7 for ray in rays)

    def test_queen_center_reach(self, table: RayTable) -> None:
        total = sum(len(r) for r in table.rays(Role.QUEEN, Color.WHITE, D4))
        assert total == 27

    def test_occupancy_is_ignored(self, table: RayTable) -> None:
        # Geometry only: a rook on a1 reaches h1 regardless of the pieces.
        rays = table.rays(Role.ROOK, Color.WHITE, A1)
        assert any(H1 in ray for ray in rays)


class TestSteppers:
    def test_knight_corner(self, table: RayTable) -> None:
        targets = {ray[0] for ray in table.rays(Role.KNIGHT, Color.WHITE, H8) if ray}
        assert targets == {(1, 5), (2, 6)}

    def test_knight_rays_length_one(self, table: RayTable) -> None:
        assert all(len(r) <= 1 for r in table.rays(Role.KNIGHT, Color.WHITE, D4))

    def test_king_center(self, table: RayTable) -> None:
        rays = table.rays(Role.KING, Color.WHITE, D4)
        assert sum(len(r) for r in rays) == 8

    def test_color_irrelevant_for_pieces(self, table: RayTable) -> None:
        assert table.rays(Role.KNIGHT, Color.WHITE, B2) == table.rays(
            Role.KNIGHT, Color.BLACK, B2
        )


class TestPawnRays:
    def test_white_pawn_advances_two(self, table: RayTable) -> None:
        (ray,) = table.rays(Role.PAWN, Color.WHITE, E2)
        assert ray == ((5, 4), E4)

    def test_black_pawn_advances_down(self, table: RayTable) -> None:
        (ray,) = table.rays(Role.PAWN, Color.BLACK, E7)
        assert ray == ((2, 4), E5)

    def test_pawn_ray_truncated_at_edge(self, table: RayTable) -> None:
        (ray,) = table.rays(Role.PAWN, Color.WHITE, (1, 0))
        assert ray == ((0, 0),)

    def test_white_capture_diagonals(self, table: RayTable) -> None:
        rays = table.capture_rays(Color.WHITE, E2)
        assert set(rays) == {((5, 3),), ((5, 5),)}

    def test_black_capture_diagonals(self, table: RayTable) -> None:
        rays = table.capture_rays(Color.BLACK, E7)
        assert set(rays) == {((2, 3),), ((2, 5),)}

    def test_edge_file_has_one_capture(self, table: RayTable) -> None:
        assert table.capture_rays(Color.WHITE, (6, 0)) == (((5, 1),),)
        assert table.capture_rays(Color.BLACK, (1, 7)) == (((2, 6),),)

    def test_last_row_has_no_capture(self, table: RayTable) -> None:
        assert table.capture_rays(Color.WHITE, A8) == ()


class TestUnbuiltTable:
    def test_empty_table_refuses_queries(self) -> None:
        empty = RayTable()
        assert not empty.is_built
        with pytest.raises(RayTableNotBuiltError):
            empty.rays(Role.ROOK, Color.WHITE, A1)
        with pytest.raises(RayTableNotBuiltError):
            empty.capture_rays(Color.WHITE, A1)

    def test_get_ray_without_table(self) -> None:
        with pytest.raises(RayTableNotBuiltError):
            get_ray(None, Role.KING, E2)

    def test_get_ray_with_table(self, table: RayTable) -> None:
        assert get_ray(table, Role.PAWN, E7, Color.BLACK) == table.rays(
            Role.PAWN, Color.BLACK, E7
        )

    def test_built_table_reports_built(self, table: RayTable) -> None:
        assert table.is_built
