"""Static evaluation of a chess position; positive scores favour white."""

from __future__ import annotations

from mobagen.chess.moves import is_in_check, king_attack_moves
from mobagen.chess.pieces import (
    bishop_attack_moves,
    knight_attack_moves,
    pawn_attack_moves,
    pawn_count_doubles,
    pawn_cover_moves,
    pawn_is_isolated,
    pawn_possible_moves,
    queen_attack_moves,
    rook_attack_moves,
)
from mobagen.chess.state import PieceColor, PieceData, PieceType, WorldState
from mobagen.point2d import Point2D

_SLIDER_VALUES = {
    PieceType.QUEEN: (90, queen_attack_moves),
    PieceType.ROOK: (50, rook_attack_moves),
    PieceType.KNIGHT: (35, knight_attack_moves),
    PieceType.BISHOP: (30, bishop_attack_moves),
}


def distance_to_center(location: Point2D) -> int:
    """Closeness to the centre: 0 on the edge ring, 3 on the four central squares."""
    dx = abs(location.x * 2 - 7)
    dy = abs(location.y * 2 - 7)
    return 3 - (min(dx, dy) - 1) // 2


def _piece_score(state: WorldState, location: Point2D, piece: PieceData) -> int | None:
    kind = piece.piece
    if kind is PieceType.KING:
        return (
            1000
            + len(king_attack_moves(state, location))
            + distance_to_center(location)
            - is_in_check(state, piece.color) * 10
        )
    if kind in _SLIDER_VALUES:
        value, mobility = _SLIDER_VALUES[kind]
        return value + len(mobility(state, location)) + distance_to_center(location)
    if kind is PieceType.PAWN:
        moves = len(pawn_possible_moves(state, location))
        score = 10 + moves + distance_to_center(location)
        score += len(pawn_attack_moves(state, location))
        score += len(pawn_cover_moves(state, location))
        if moves == 0:
            score -= 2
        score -= 2 * pawn_count_doubles(state, location)
        if pawn_is_isolated(state, location):
            score -= 1
        return score
    return None


def material_score(state: WorldState) -> int:
    """Material, mobility and position of every piece, white minus black."""
    score = 0
    for line in range(8):
        for column in range(8):
            location = Point2D(column, line)
            piece = state.piece_at(location)
            piece_score = _piece_score(state, location, piece)
            if piece_score is None:
                continue
            if piece.color is PieceColor.BLACK:
                score -= piece_score
            else:
                score += piece_score
    return score