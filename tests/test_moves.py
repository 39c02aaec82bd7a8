import pytest

from mobagen.chess.moves import (
    find_king,
    is_in_check,
    king_attack_moves,
    king_cover_moves_naive,
    list_moves,
    list_places_king_cannot_go,
)
from mobagen.chess.pieces import knight_attack_moves, pawn_possible_moves
from mobagen.chess.state import PieceColor, PieceData, PieceType, WorldState
from mobagen.point2d import Point2D

W = PieceColor.WHITE
B = PieceColor.BLACK


def board(*placements, turn=W):
    state = WorldState()
    state.turn = turn
    for color, kind, x, y in placements:
        state.set_piece(PieceData(color, kind), Point2D(x, y))
    return state


@pytest.fixture
def initial():
    state = WorldState()
    state.reset()
    return state


def test_find_king_on_initial_board(initial):
    assert find_king(initial, W) == Point2D(4, 0)
    assert find_king(initial, B) == Point2D(4, 7)


def test_find_king_without_king():
    assert find_king(WorldState(), W) is None


def test_initial_kings_cannot_move(initial):
    assert king_attack_moves(initial, Point2D(4, 0)) == set()
    assert king_attack_moves(initial, Point2D(4, 7)) == set()


def test_lone_king_in_corner():
    state = board((W, PieceType.KING, 0, 0))
    assert king_attack_moves(state, Point2D(0, 0)) == {Point2D(0, 1), Point2D(1, 0), Point2D(1, 1)}


def test_king_avoids_covered_squares():
    free = board((W, PieceType.KING, 0, 0))
    guarded = board((W, PieceType.KING, 0, 0), (B, PieceType.ROOK, 1, 7))
    moves = king_attack_moves(guarded, Point2D(0, 0))
    covered = list_places_king_cannot_go(guarded, W)
    assert moves.isdisjoint(covered)
    assert moves < king_attack_moves(free, Point2D(0, 0))


def test_king_moves_of_non_king(initial):
    assert king_attack_moves(initial, Point2D(0, 1)) == set()
    assert king_cover_moves_naive(initial, Point2D(0, 1)) == set()


def test_cover_includes_friendly_pieces():
    state = board((W, PieceType.KING, 4, 0), (W, PieceType.PAWN, 4, 1))
    assert Point2D(4, 1) in king_cover_moves_naive(state, Point2D(4, 0))
    assert Point2D(4, 1) not in king_attack_moves(state, Point2D(4, 0))


def test_not_in_check_at_start(initial):
    assert is_in_check(initial, W) == 0
    assert is_in_check(initial, B) == 0


def test_rook_gives_check():
    state = board((W, PieceType.KING, 0, 0), (B, PieceType.ROOK, 0, 7))
    assert is_in_check(state, W) == 1


def test_second_attacker_adds_to_check():
    one = board((W, PieceType.KING, 0, 0), (B, PieceType.ROOK, 0, 7))
    two = board((W, PieceType.KING, 0, 0), (B, PieceType.ROOK, 0, 7), (B, PieceType.BISHOP, 7, 7))
    assert is_in_check(two, W) > is_in_check(one, W)


def test_no_king_means_no_check():
    state = board((B, PieceType.ROOK, 0, 7))
    assert is_in_check(state, W) == 0


def test_list_moves_only_for_side(initial):
    white = list_moves(initial, W)
    assert white
    assert all(move.color is W for move in white)
    assert all(initial.piece_at(move.origin).color is W for move in white)


def test_list_moves_matches_piece_generators(initial):
    targets = {(m.origin, m.target) for m in list_moves(initial, W)}
    expected = set()
    for x in range(8):
        origin = Point2D(x, 1)
        expected |= {(origin, t) for t in pawn_possible_moves(initial, origin)}
    for x in (1, 6):
        origin = Point2D(x, 0)
        expected |= {(origin, t) for t in knight_attack_moves(initial, origin)}
    assert targets == expected


def test_list_moves_symmetric_at_start(initial):
    assert len(list_moves(initial, W)) == len(list_moves(initial, B))


def test_places_king_cannot_go_at_start(initial):
    covered = list_places_king_cannot_go(initial, W)
    assert all(Point2D(x, 5) in covered for x in range(8))
    assert all(p.y >= 5 for p in covered)


def test_empty_board_has_no_moves():
    assert list_moves(WorldState(), W) == []
    assert list_places_king_cannot_go(WorldState(), W) == set()