"""King moves, move listing and attacked squares for a chess position."""

from __future__ import annotations

from collections.abc import Callable, Iterator

from mobagen.chess.pieces import (
    bishop_attack_moves,
    bishop_cover_moves,
    knight_attack_moves,
    knight_cover_moves,
    pawn_cover_moves,
    pawn_possible_moves,
    queen_attack_moves,
    queen_cover_moves,
    rook_attack_moves,
    rook_cover_moves,
)
from mobagen.chess.state import Move, PieceColor, PieceType, WorldState, generate_list_of_moves
from mobagen.point2d import Point2D

_KING_DIRECTIONS = (
    Point2D(0, 1),
    Point2D(0, -1),
    Point2D(1, 0),
    Point2D(-1, 0),
    Point2D(1, 1),
    Point2D(-1, 1),
    Point2D(1, -1),
    Point2D(-1, -1),
)

MoveGenerator = Callable[[WorldState, Point2D], set[Point2D]]


def _squares() -> Iterator[Point2D]:
    """Every board square, rank by rank from the first."""
    for line in range(8):
        for column in range(8):
            yield Point2D(column, line)


def king_attack_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    """King steps onto empty or enemy squares that the opponent does not cover."""
    piece = world.piece_at(origin)
    if piece.piece is not PieceType.KING:
        return set()
    attacked = list_places_king_cannot_go(world, piece.color)
    moves: set[Point2D] = set()
    for direction in _KING_DIRECTIONS:
        target = origin + direction
        other = world.piece_at(target)
        if other.piece is PieceType.WRONG:
            continue
        if (other.piece is PieceType.NONE or other.color is not piece.color) and target not in attacked:
            moves.add(target)
    return moves


def king_cover_moves_naive(world: WorldState, origin: Point2D) -> set[Point2D]:
    """Adjacent squares that are empty or hold a friendly piece."""
    piece = world.piece_at(origin)
    if piece.piece is not PieceType.KING:
        return set()
    moves: set[Point2D] = set()
    for direction in _KING_DIRECTIONS:
        target = origin + direction
        other = world.piece_at(target)
        if other.piece is PieceType.WRONG:
            continue
        if other.piece is PieceType.NONE or other.color is piece.color:
            moves.add(target)
    return moves


def find_king(state: WorldState, color: PieceColor) -> Point2D | None:
    """Square of the first king of ``color``, or ``None`` when it has none."""
    for location in _squares():
        piece = state.piece_at(location)
        if piece.color is color and piece.piece is PieceType.KING:
            return location
    return None


def is_in_check(state: WorldState, color: PieceColor) -> int:
    """Number of opponent moves that land on the king of ``color``."""
    king = find_king(state, color)
    if king is None:
        return 0
    return sum(1 for move in list_moves(state, color.opponent) if move.target == king)


_ATTACKS: dict[PieceType, MoveGenerator] = {
    PieceType.ROOK: rook_attack_moves,
    PieceType.BISHOP: bishop_attack_moves,
    PieceType.PAWN: pawn_possible_moves,
    PieceType.QUEEN: queen_attack_moves,
    PieceType.KNIGHT: knight_attack_moves,
    PieceType.KING: king_attack_moves,
}

_COVERS: dict[PieceType, MoveGenerator] = {
    PieceType.ROOK: rook_cover_moves,
    PieceType.BISHOP: bishop_cover_moves,
    PieceType.PAWN: pawn_cover_moves,
    PieceType.QUEEN: queen_cover_moves,
    PieceType.KNIGHT: knight_cover_moves,
    PieceType.KING: king_cover_moves_naive,
}


def list_moves(state: WorldState, turn: PieceColor) -> list[Move]:
    """Every move available to the pieces of ``turn``, square by square."""
    moves: list[Move] = []
    for location in _squares():
        piece = state.piece_at(location)
        if piece.piece is PieceType.NONE or piece.color is not turn:
            continue
        generator = _ATTACKS.get(piece.piece)
        if generator is not None:
            moves.extend(generate_list_of_moves(piece, location, generator(state, location)))
    return moves


def list_places_king_cannot_go(state: WorldState, turn: PieceColor) -> set[Point2D]:
    """Squares covered by the pieces of the side that is not ``turn``."""
    covered: set[Point2D] = set()
    for location in _squares():
        piece = state.piece_at(location)
        if piece.piece in (PieceType.NONE, PieceType.WRONG) or piece.color is turn:
            continue
        covered |= _COVERS[piece.piece](state, location)
    return covered