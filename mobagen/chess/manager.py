"""Interactive chess game: piece selection by clicks, undo and an optional AI."""

from __future__ import annotations

from collections.abc import Callable

from mobagen.chess.heuristics import material_score
from mobagen.chess.moves import king_attack_moves
from mobagen.chess.pieces import (
    bishop_attack_moves,
    knight_attack_moves,
    pawn_possible_moves,
    queen_attack_moves,
    rook_attack_moves,
)
from mobagen.chess.search import next_move
from mobagen.chess.state import PieceColor, PieceType, WorldState
from mobagen.point2d import Point2D

_MOVE_GENERATORS: dict[PieceType, Callable[[WorldState, Point2D], set[Point2D]]] = {
    PieceType.PAWN: pawn_possible_moves,
    PieceType.ROOK: rook_attack_moves,
    PieceType.KNIGHT: knight_attack_moves,
    PieceType.BISHOP: bishop_attack_moves,
    PieceType.QUEEN: queen_attack_moves,
    PieceType.KING: king_attack_moves,
}


class ChessGame:
    """A game in progress, driven by clicks on board squares."""

    def __init__(self) -> None:
        self.state = WorldState()
        self.state.reset()
        self.previous_states: list[WorldState] = []
        self.selected: Point2D | None = None
        self.valid_moves: set[Point2D] = set()
        self.ai_color = PieceColor.BLACK
        self.ai_enabled = False
        self._last_clicked: Point2D | None = None
        self.score = material_score(self.state)

    def reset(self) -> None:
        """Return to the starting position."""
        self.state.reset()
        self.score = material_score(self.state)

    def undo(self) -> bool:
        """Restore the position before the last move; ``False`` if there is none."""
        if not self.previous_states:
            return False
        self._clear_selection()
        self.state = self.previous_states.pop()
        self.score = material_score(self.state)
        return True

    def moves_for(self, piece_type: PieceType, point: Point2D) -> set[Point2D]:
        """Squares a piece of ``piece_type`` on ``point`` may move to."""
        generator = _MOVE_GENERATORS.get(piece_type)
        if generator is None:
            return set()
        return generator(self.state, point)

    def click(self, index: Point2D) -> None:
        """Select a piece of the side to move, or move the selected one to ``index``.

        Clicking the selected square deselects it. Repeated clicks on the
        same square count once until :meth:`release` is called.
        """
        if index == self.selected:
            self._clear_selection()
            return
        if self._last_clicked == index:
            return
        self._last_clicked = index

        if self.selected is not None and index in self.valid_moves:
            self.previous_states.append(self.state.copy())
            self.state.move(self.selected, index)
            self.score = material_score(self.state)
            self._clear_selection()
            return

        piece = self.state.piece_at(index)
        if piece.piece is not PieceType.NONE and piece.color is self.state.turn:
            self.selected = index
            self.valid_moves = self.moves_for(piece.piece, index)
            if not self.valid_moves:
                self._clear_selection()
        else:
            self._clear_selection()

    def release(self) -> None:
        """The mouse button went up; the next click is always handled."""
        self._last_clicked = None

    def update(self, delta_time: float) -> None:
        """Let the AI play when it is enabled and its side is to move."""
        if self.ai_enabled and self.ai_color is self.state.turn:
            move = next_move(self.state)
            self.state.move(move.origin, move.target)
            self.score = material_score(self.state)

    def _clear_selection(self) -> None:
        self.selected = None
        self.valid_moves = set()