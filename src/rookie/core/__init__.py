"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from rookie.core import E2, E4, check_move, new_board

    board = new_board()
    verdict = check_move(board, E2, E4)
    if verdict.move is not None:
        board.apply_move(verdict.move)
    print(board)
"""

from rookie.core.board import Board, StaleMoveError, new_board
from rookie.core.enums import Color, IllegalReason, PieceType
from rookie.core.move import LegalMove, MoveCheck
from rookie.core.piece import Piece
from rookie.core.rules import (
    RuleOptions,
    check_move,
    is_legal_move,
    legal_destinations,
    make_move,
)
from rookie.core.types import (
    E2,
    E4,
    ALL_SQUARES,
    Square,
    is_valid_square,
    make_square,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "IllegalReason",
    "PieceType",
    # Types / helpers
    "ALL_SQUARES",
    "Square",
    "is_valid_square",
    "make_square",
    "parse_square",
    "square_name",
    "E2",
    "E4",
    # Domain objects
    "Board",
    "LegalMove",
    "MoveCheck",
    "Piece",
    "RuleOptions",
    "StaleMoveError",
    # Rules
    "check_move",
    "is_legal_move",
    "legal_destinations",
    "make_move",
    "new_board",
]
