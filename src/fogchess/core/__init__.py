"""Core domain layer — pure chess logic with zero external dependencies.

Quick start::

    from fogchess.core import Board, MoveGenerator, Player, visible_cells

    board = Board.initial()
    gen = MoveGenerator(board, Player.WHITE)
    print(sorted(gen.moves((4, 1))))
    print(len(visible_cells(board, Player.WHITE)))
"""

from fogchess.core.board import Board
from fogchess.core.enums import Player, Unit
from fogchess.core.line_of_sight import line_of_sight, ray
from fogchess.core.move_generator import MoveGenerator
from fogchess.core.notation import (
    STARTING_PLACEMENT,
    board_from_placement,
    board_to_placement,
)
from fogchess.core.piece import Piece
from fogchess.core.scenarios import (
    UnknownScenarioError,
    board_for_scenario,
    scenario_names,
)
from fogchess.core.types import (
    BOARD_SIZE,
    Coord,
    adjacent_cells,
    all_cells,
    coord_name,
    in_bounds,
    parse_coord,
)
from fogchess.core.visibility import fogged_cells, visible_cells

__all__ = [
    # Enums
    "Player",
    "Unit",
    # Types / helpers
    "BOARD_SIZE",
    "Coord",
    "adjacent_cells",
    "all_cells",
    "coord_name",
    "in_bounds",
    "parse_coord",
    # Domain objects
    "Board",
    "MoveGenerator",
    "Piece",
    # Line of sight / fog
    "fogged_cells",
    "line_of_sight",
    "ray",
    "visible_cells",
    # Scenarios / notation
    "STARTING_PLACEMENT",
    "UnknownScenarioError",
    "board_for_scenario",
    "board_from_placement",
    "board_to_placement",
    "scenario_names",
]
