from unblock.models.board import Board, Direction
from unblock.models.piece import Orientation, Piece
from unblock.models.puzzle import Puzzle
from unblock.models.state import State

__all__ = ["Board", "Direction", "Orientation", "Piece", "Puzzle", "State"]
