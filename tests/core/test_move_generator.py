"""Tests for MoveGenerator and the ray caster."""

from fogchess.core.board import Board
from fogchess.core.enums import Player, Unit
from fogchess.core.line_of_sight import line_of_sight, ray
from fogchess.core.move_generator import MoveGenerator
from fogchess.core.notation import board_from_placement
from fogchess.core.piece import Piece
from fogchess.core.types import in_bounds


def _board_with(*placed: tuple[tuple[int, int], Piece]) -> Board:
    board = Board()
    for pos, piece in placed:
        board.set(pos, piece)
    return board


W = Player.WHITE
B = Player.BLACK


def _on_board(cells: set[tuple[int, int]]) -> set[tuple[int, int]]:
    return {c for c in cells if in_bounds(c)}


class TestRay:
    def test_seven_cells_not_range_filtered(self) -> None:
        cells = list(ray((5, 5), (1, 0)))
        assert cells == [(6, 5), (7, 5), (8, 5), (9, 5), (10, 5), (11, 5), (12, 5)]

    def test_line_of_sight_stops_at_first_occupied_inclusive(self) -> None:
        board = _board_with(((3, 5), Piece(Unit.PAWN, B)))
        cells = list(line_of_sight(ray((3, 3), (0, 1)), board))
        assert cells == [(3, 4), (3, 5)]

    def test_line_of_sight_is_lazy(self) -> None:
        board = Board()
        seen: list[tuple[int, int]] = []

        def candidates():
            for pos in [(0, 1), (0, 2)]:
                seen.append(pos)
                yield pos

        it = line_of_sight(candidates(), board)
        assert seen == []
        next(it)
        assert seen == [(0, 1)]


class TestOccupancy:
    def test_ally_and_enemy(self) -> None:
        board = _board_with(((1, 1), Piece(Unit.PAWN, W)), ((2, 2), Piece(Unit.PAWN, B)))
        gen = MoveGenerator(board, W)
        assert gen.contains_ally((1, 1)) and not gen.contains_enemy((1, 1))
        assert gen.contains_enemy((2, 2)) and not gen.contains_ally((2, 2))
        assert not gen.contains_ally((3, 3)) and not gen.contains_enemy((3, 3))

    def test_off_board_is_neither(self) -> None:
        gen = MoveGenerator(Board.initial(), W)
        for pos in [(-1, 0), (0, -1), (8, 0), (0, 8)]:
            assert not gen.contains_ally(pos)
            assert not gen.contains_enemy(pos)

    def test_relative_to_perspective(self) -> None:
        board = Board.initial()
        assert MoveGenerator(board, B).contains_ally((0, 7))
        assert MoveGenerator(board, B).contains_enemy((0, 0))


class TestPawn:
    def test_double_step_when_unmoved(self) -> None:
        board = _board_with(((4, 1), Piece(Unit.PAWN, W)))
        assert MoveGenerator(board, W).moves((4, 1)) == {(4, 2), (4, 3)}

    def test_no_double_step_after_moving(self) -> None:
        board = _board_with(((4, 1), Piece(Unit.PAWN, W)))
        board.move_piece((4, 1), (4, 2))
        assert MoveGenerator(board, W).moves((4, 2)) == {(4, 3)}

    def test_blocked_single_blocks_double(self) -> None:
        board = _board_with(
            ((4, 1), Piece(Unit.PAWN, W)), ((4, 2), Piece(Unit.KNIGHT, B))
        )
        assert MoveGenerator(board, W).moves((4, 1)) == set()

    def test_blocked_double(self) -> None:
        board = _board_with(
            ((4, 1), Piece(Unit.PAWN, W)), ((4, 3), Piece(Unit.KNIGHT, B))
        )
        assert MoveGenerator(board, W).moves((4, 1)) == {(4, 2)}

    def test_diagonal_attacks_need_enemy(self) -> None:
        board = _board_with(
            ((4, 1), Piece(Unit.PAWN, W)),
            ((3, 2), Piece(Unit.PAWN, B)),
            ((5, 2), Piece(Unit.PAWN, W)),
        )
        assert MoveGenerator(board, W).moves((4, 1)) == {(3, 2), (4, 2), (4, 3)}

    def test_black_moves_down(self) -> None:
        board = _board_with(
            ((2, 6), Piece(Unit.PAWN, B)), ((1, 5), Piece(Unit.ROOK, W))
        )
        assert MoveGenerator(board, B).moves((2, 6)) == {(1, 5), (2, 5), (2, 4)}

    def test_initial_position_pawns(self) -> None:
        gen = MoveGenerator(Board.initial(), W)
        assert gen.moves((0, 1)) == {(0, 2), (0, 3)}


class TestKnightAndKing:
    def test_knight_center(self) -> None:
        board = _board_with(((3, 3), Piece(Unit.KNIGHT, W)))
        assert len(MoveGenerator(board, W).moves((3, 3))) == 8

    def test_knight_jumps_over_pieces(self) -> None:
        gen = MoveGenerator(Board.initial(), W)
        assert gen.moves((1, 0)) >= {(0, 2), (2, 2)}
        assert (3, 1) not in gen.moves((1, 0))

    def test_knight_corner_keeps_off_board_candidates(self) -> None:
        board = _board_with(((0, 0), Piece(Unit.KNIGHT, W)))
        moves = MoveGenerator(board, W).moves((0, 0))
        assert {(1, 2), (2, 1)} <= moves
        assert (-1, 2) in moves

    def test_king_excludes_allies(self) -> None:
        board = _board_with(
            ((4, 4), Piece(Unit.KING, W)),
            ((4, 5), Piece(Unit.PAWN, W)),
            ((3, 3), Piece(Unit.PAWN, B)),
        )
        moves = MoveGenerator(board, W).moves((4, 4))
        assert (4, 5) not in moves
        assert (3, 3) in moves
        assert len(moves) == 7


class TestSliding:
    def test_rook_truncated_by_enemy(self) -> None:
        board = _board_with(
            ((3, 3), Piece(Unit.ROOK, W)), ((3, 6), Piece(Unit.PAWN, B))
        )
        moves = MoveGenerator(board, W).moves((3, 3))
        assert (3, 6) in moves
        assert (3, 7) not in moves

    def test_rook_stops_before_ally(self) -> None:
        board = _board_with(
            ((3, 3), Piece(Unit.ROOK, W)), ((5, 3), Piece(Unit.PAWN, W))
        )
        moves = MoveGenerator(board, W).moves((3, 3))
        assert (4, 3) in moves
        assert (5, 3) not in moves and (6, 3) not in moves

    def test_rook_rays_run_past_the_edge(self) -> None:
        board = _board_with(((0, 0), Piece(Unit.ROOK, W)))
        moves = MoveGenerator(board, W).moves((0, 0))
        assert len(moves) == 28
        assert len(_on_board(moves)) == 14
        assert (-7, 0) in moves and (-8, 0) not in moves

    def test_bishop_diagonals(self) -> None:
        board = _board_with(((2, 0), Piece(Unit.BISHOP, W)))
        moves = _on_board(MoveGenerator(board, W).moves((2, 0)))
        assert moves == {(1, 1), (0, 2), (3, 1), (4, 2), (5, 3), (6, 4), (7, 5)}

    def test_queen_is_rook_plus_bishop(self) -> None:
        board = board_from_placement("8/8/8/8/3Q4/8/8/8")
        board_r = board_from_placement("8/8/8/8/3R4/8/8/8")
        board_b = board_from_placement("8/8/8/8/3B4/8/8/8")
        q = MoveGenerator(board, W).moves((3, 3))
        r = MoveGenerator(board_r, W).moves((3, 3))
        b = MoveGenerator(board_b, W).moves((3, 3))
        assert q == r | b
        assert len(_on_board(q)) == 27

    def test_initial_position_back_rank_blocked(self) -> None:
        gen = MoveGenerator(Board.initial(), W)
        for x in (0, 2, 3, 4, 5, 7):
            assert _on_board(gen.moves((x, 0))) == set()


class TestLineOfSight:
    def test_empty_cell_has_no_moves(self) -> None:
        gen = MoveGenerator(Board(), W)
        assert gen.moves((3, 3)) == set()

    def test_pawn_sees_empty_diagonals(self) -> None:
        board = _board_with(((4, 1), Piece(Unit.PAWN, W)))
        sight = MoveGenerator(board, W).line_of_sight((4, 1))
        assert {(3, 2), (5, 2), (3, 0), (5, 0), (4, 0)} <= sight
        assert (4, 3) in sight

    def test_includes_neighbours_even_if_allied(self) -> None:
        board = Board.initial()
        sight = MoveGenerator(board, W).line_of_sight((4, 0))
        assert (3, 0) in sight and (4, 1) in sight
