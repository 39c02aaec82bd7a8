"""Move generation for bishops, rooks, queens, knights and pawns."""

from __future__ import annotations

from mobagen.chess.state import PieceColor, PieceData, PieceType, WorldState
from mobagen.point2d import Point2D

_DIAGONALS = (Point2D(1, 1), Point2D(-1, 1), Point2D(1, -1), Point2D(-1, -1))
_ORTHOGONALS = (Point2D(0, 1), Point2D(0, -1), Point2D(1, 0), Point2D(-1, 0))
_ALL_DIRECTIONS = _ORTHOGONALS + _DIAGONALS

_KNIGHT_ATTACK_DELTAS = (
    Point2D(-1, 2),
    Point2D(1, 2),
    Point2D(-2, 1),
    Point2D(2, 1),
    Point2D(-2, -1),
    Point2D(2, -1),
    Point2D(-1, -2),
    Point2D(1, -2),
)
# Cover squares repeat some leftward jumps and never look two squares to the right.
_KNIGHT_COVER_DELTAS = (
    Point2D(-1, 2),
    Point2D(1, 2),
    Point2D(-2, 1),
    Point2D(-2, 1),
    Point2D(-2, -1),
    Point2D(-2, -1),
    Point2D(-1, -2),
    Point2D(1, -2),
)


def _slide(
    world: WorldState,
    origin: Point2D,
    kind: PieceType,
    directions: tuple[Point2D, ...],
    cover: bool,
) -> set[Point2D]:
    """Squares reached along ``directions`` until a piece or the edge stops the ray.

    The blocking square is included when it holds an enemy piece (attack)
    or a friendly one (cover).
    """
    piece = world.piece_at(origin)
    if piece.piece is not kind:
        return set()
    moves: set[Point2D] = set()
    for direction in directions:
        current = origin + direction
        other = world.piece_at(current)
        while other.piece is not PieceType.WRONG:
            if other.piece is PieceType.NONE:
                moves.add(current)
            else:
                if (other.color is piece.color) == cover:
                    moves.add(current)
                break
            current = current + direction
            other = world.piece_at(current)
    return moves


def bishop_attack_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    return _slide(world, origin, PieceType.BISHOP, _DIAGONALS, cover=False)


def bishop_cover_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    return _slide(world, origin, PieceType.BISHOP, _DIAGONALS, cover=True)


def rook_attack_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    return _slide(world, origin, PieceType.ROOK, _ORTHOGONALS, cover=False)


def rook_cover_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    return _slide(world, origin, PieceType.ROOK, _ORTHOGONALS, cover=True)


def queen_attack_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    return _slide(world, origin, PieceType.QUEEN, _ALL_DIRECTIONS, cover=False)


def queen_cover_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    return _slide(world, origin, PieceType.QUEEN, _ALL_DIRECTIONS, cover=True)


def _occupied(piece: PieceData) -> bool:
    return piece.piece is not PieceType.NONE and piece.piece is not PieceType.WRONG


def knight_attack_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    """Knight jumps onto empty squares or enemy pieces."""
    piece = world.piece_at(origin)
    if piece.piece is not PieceType.KNIGHT:
        return set()
    moves: set[Point2D] = set()
    for delta in _KNIGHT_ATTACK_DELTAS:
        target = origin + delta
        other = world.piece_at(target)
        if other.piece is PieceType.WRONG or (_occupied(other) and other.color is piece.color):
            continue
        moves.add(target)
    return moves


def knight_cover_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    """Knight jumps onto empty squares or friendly pieces."""
    piece = world.piece_at(origin)
    if piece.piece is not PieceType.KNIGHT:
        return set()
    moves: set[Point2D] = set()
    for delta in _KNIGHT_COVER_DELTAS:
        target = origin + delta
        other = world.piece_at(target)
        if other.piece is PieceType.WRONG or (_occupied(other) and other.color is not piece.color):
            continue
        moves.add(target)
    return moves


def _forward(color: PieceColor) -> int:
    return 1 if color is PieceColor.WHITE else -1


def pawn_possible_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    """Pawn pushes, the double push from the start rank, and diagonal captures."""
    piece = world.piece_at(origin)
    if piece.piece is not PieceType.PAWN:
        return set()
    step = _forward(piece.color)
    start_rank = 1 if piece.color is PieceColor.WHITE else 6
    points: set[Point2D] = set()

    ahead = Point2D(origin.x, origin.y + step)
    if world.piece_at(ahead).piece is PieceType.NONE:
        points.add(ahead)
        if origin.y == start_rank:
            two_ahead = Point2D(origin.x, origin.y + 2 * step)
            if world.piece_at(two_ahead).piece is PieceType.NONE:
                points.add(two_ahead)

    for dx in (1, -1):
        diagonal = Point2D(origin.x + dx, origin.y + step)
        other = world.piece_at(diagonal)
        if _occupied(other) and other.color is piece.color.opponent:
            points.add(diagonal)
    return points


def _pawn_diagonals(world: WorldState, origin: Point2D, cover: bool) -> set[Point2D]:
    piece = world.piece_at(origin)
    if piece.piece is not PieceType.PAWN:
        return set()
    step = _forward(piece.color)
    wanted = piece.color if cover else piece.color.opponent
    points: set[Point2D] = set()
    for dx in (1, -1):
        diagonal = Point2D(origin.x + dx, origin.y + step)
        other = world.piece_at(diagonal)
        if other.piece is PieceType.NONE or (other.piece is not PieceType.WRONG and other.color is wanted):
            points.add(diagonal)
    return points


def pawn_attack_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    """Forward diagonals that are empty or hold an enemy piece."""
    return _pawn_diagonals(world, origin, cover=False)


def pawn_cover_moves(world: WorldState, origin: Point2D) -> set[Point2D]:
    """Forward diagonals that are empty or hold a friendly piece."""
    return _pawn_diagonals(world, origin, cover=True)


def pawn_count_doubles(world: WorldState, origin: Point2D) -> int:
    """Other pawns of the same colour in this pawn's column."""
    piece = world.piece_at(origin)
    if piece.piece is not PieceType.PAWN:
        return 0
    same = sum(1 for y in range(8) if world.piece_at(Point2D(origin.x, y)) == piece)
    return same - 1


def pawn_is_isolated(world: WorldState, origin: Point2D) -> bool:
    """Whether no pawn of the same colour stands on any of the eight adjacent squares.

    A square without a pawn counts as isolated.
    """
    piece = world.piece_at(origin)
    if piece.piece is not PieceType.PAWN:
        return True
    adjacency = (
        origin.right(),
        origin.left(),
        origin.up().left(),
        origin.up().right(),
        origin.down().left(),
        origin.down().right(),
        origin.up(),
        origin.down(),
    )
    return not any(world.piece_at(pos) == piece for pos in adjacency)