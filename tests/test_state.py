import itertools

import pytest

from mobagen.chess.state import (
    IllegalMoveError,
    Move,
    MoveState,
    MoveType,
    PieceColor,
    PieceData,
    PieceType,
    WorldState,
    generate_list_of_moves,
)
from mobagen.point2d import Point2D

ALL_SQUARES = [Point2D(x, y) for y in range(8) for x in range(8)]


def started() -> WorldState:
    state = WorldState()
    state.reset()
    return state


def test_reset_board_text():
    expected = (
        "8 r n b q k b n r\n"
        "7 p p p p p p p p\n"
        "6 . . . . . . . .\n"
        "5 . . . . . . . .\n"
        "4 . . . . . . . .\n"
        "3 . . . . . . . .\n"
        "2 P P P P P P P P\n"
        "1 R N B Q K B N R\n"
        "  A B C D E F G H\n"
    )
    assert str(started()) == expected


def test_fresh_state_is_empty_and_white_to_move():
    state = WorldState()
    assert state.turn is PieceColor.WHITE
    assert all(state.piece_at(p).piece is PieceType.NONE for p in ALL_SQUARES)


@pytest.mark.parametrize(
    "color, kind", list(itertools.product(PieceColor, PieceType))
)
def test_pack_unpack_round_trip(color, kind):
    piece = PieceData(color, kind)
    packed = piece.pack()
    assert 0 <= packed < 16
    assert PieceData.unpack(packed) == piece


def test_empty_and_wrong():
    assert PieceData.empty() == PieceData(PieceColor.WHITE, PieceType.NONE)
    assert PieceData.wrong().piece is PieceType.WRONG


def test_to_char():
    assert PieceData(PieceColor.WHITE, PieceType.KNIGHT).to_char() == "N"
    assert PieceData(PieceColor.BLACK, PieceType.KNIGHT).to_char() == "n"
    assert PieceData.empty().to_char() == "."
    assert PieceData.wrong().to_char() == "."


@pytest.mark.parametrize("pos", [Point2D(-1, 0), Point2D(8, 0), Point2D(0, -1), Point2D(0, 8)])
def test_piece_at_off_board_is_wrong(pos):
    assert started().piece_at(pos) == PieceData.wrong()


def test_set_piece_touches_only_its_square():
    queen = PieceData(PieceColor.BLACK, PieceType.QUEEN)
    for pos in ALL_SQUARES:
        state = started()
        before = {p: state.piece_at(p) for p in ALL_SQUARES}
        state.set_piece(queen, pos)
        assert state.piece_at(pos) == queen
        assert all(state.piece_at(p) == before[p] for p in ALL_SQUARES if p != pos)


def test_set_piece_off_board_raises():
    with pytest.raises(IndexError):
        WorldState().set_piece(PieceData.empty(), Point2D(8, 8))


def test_move_pawn_changes_board_and_turn():
    state = started()
    pawn = state.piece_at(Point2D(4, 1))
    state.move(Point2D(4, 1), Point2D(4, 3))
    assert state.piece_at(Point2D(4, 3)) == pawn
    assert state.piece_at(Point2D(4, 1)).piece is PieceType.NONE
    assert state.turn is PieceColor.BLACK


def test_move_out_of_turn_raises_and_keeps_board():
    state = started()
    before = state.copy()
    with pytest.raises(IllegalMoveError):
        state.move(Point2D(4, 6), Point2D(4, 4))
    assert state == before


def test_move_onto_own_piece_raises():
    state = started()
    with pytest.raises(IllegalMoveError):
        state.move(Point2D(0, 0), Point2D(0, 1))


def test_move_from_or_to_off_board_raises():
    state = started()
    with pytest.raises(IllegalMoveError):
        state.move(Point2D(-1, 0), Point2D(0, 2))
    with pytest.raises(IllegalMoveError):
        state.move(Point2D(0, 1), Point2D(0, -1))


def test_capture_enemy_piece():
    state = WorldState()
    rook = PieceData(PieceColor.WHITE, PieceType.ROOK)
    state.set_piece(rook, Point2D(0, 0))
    state.set_piece(PieceData(PieceColor.BLACK, PieceType.PAWN), Point2D(0, 5))
    state.move(Point2D(0, 0), Point2D(0, 5))
    assert state.piece_at(Point2D(0, 5)) == rook
    assert state.turn is PieceColor.BLACK


def test_copy_is_independent():
    state = started()
    duplicate = state.copy()
    assert duplicate == state
    duplicate.move(Point2D(1, 0), Point2D(2, 2))
    assert duplicate != state
    assert state.piece_at(Point2D(1, 0)).piece is PieceType.KNIGHT


def test_end_turn_alternates():
    state = WorldState()
    state.end_turn()
    assert state.turn is PieceColor.BLACK
    state.end_turn()
    assert state.turn is PieceColor.WHITE
    assert PieceColor.WHITE.opponent is PieceColor.BLACK


def test_generate_list_of_moves():
    piece = PieceData(PieceColor.WHITE, PieceType.KNIGHT)
    origin = Point2D(1, 0)
    targets = {Point2D(0, 2), Point2D(2, 2)}
    moves = generate_list_of_moves(piece, origin, targets)
    assert {m.target for m in moves} == targets
    assert all(m.origin == origin and m.piece_data == piece for m in moves)
    assert all(m.move_type is MoveType.NORMAL for m in moves)


def test_move_rejects_off_board_squares():
    with pytest.raises(ValueError):
        Move(Point2D(0, 0), Point2D(8, 0), PieceColor.WHITE, PieceType.ROOK)


def test_move_states_sort_by_score():
    board = WorldState()
    states = [MoveState(board, [], score) for score in (5, -3, 2)]
    assert [s.score for s in sorted(states)] == sorted(s.score for s in states)
    move = Move(Point2D(0, 0), Point2D(0, 1), PieceColor.WHITE, PieceType.ROOK)
    other = Move(Point2D(0, 1), Point2D(0, 2), PieceColor.WHITE, PieceType.ROOK)
    chain = MoveState(board, [move, other], 0)
    assert chain.first_move == move
    assert chain.current_move == other