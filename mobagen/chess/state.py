"""Chess board state packed four bits per square, with pieces and moves."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum, IntEnum

from mobagen.point2d import Point2D

_BOARD_SIDE = 8
_CELL_BYTES = _BOARD_SIDE * _BOARD_SIDE // 2


class IllegalMoveError(ValueError):
    """Raised when a move cannot be made on the current board."""


class MoveType(IntEnum):
    """Kind of move, as stored in three bits."""

    NORMAL = 0b000
    CAPTURE = 0b001
    EN_PASSANT = 0b010
    CASTLING = 0b011
    PROMOTE_TO_BISHOP = 0b100
    PROMOTE_TO_KNIGHT = 0b101
    PROMOTE_TO_ROOK = 0b110
    PROMOTE_TO_QUEEN = 0b111


class PieceType(IntEnum):
    """Kind of piece, as stored in three bits; ``WRONG`` marks off-board squares."""

    NONE = 0b000
    KING = 0b001
    QUEEN = 0b010
    BISHOP = 0b011
    KNIGHT = 0b100
    ROOK = 0b101
    PAWN = 0b110
    WRONG = 0b111


class PieceColor(Enum):
    """Side of a piece, stored in one bit."""

    BLACK = False
    WHITE = True

    @property
    def opponent(self) -> PieceColor:
        return PieceColor(not self.value)


_PIECE_CHARS = {
    PieceType.PAWN: "p",
    PieceType.ROOK: "r",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}


@dataclass(frozen=True)
class PieceData:
    """A coloured piece; packs into four bits as ``piece << 1 | color``."""

    color: PieceColor = PieceColor.WHITE
    piece: PieceType = PieceType.NONE

    def pack(self) -> int:
        return int(self.color.value) | (int(self.piece) << 1)

    @classmethod
    def unpack(cls, data: int) -> PieceData:
        return cls(PieceColor(bool(data & 0b1)), PieceType((data >> 1) & 0b111))

    @classmethod
    def empty(cls) -> PieceData:
        return cls(PieceColor.WHITE, PieceType.NONE)

    @classmethod
    def wrong(cls) -> PieceData:
        return cls(PieceColor.WHITE, PieceType.WRONG)

    def to_char(self) -> str:
        """Board letter of the piece: upper case for white, ``.`` for none."""
        char = _PIECE_CHARS.get(self.piece, ".")
        return char.upper() if self.color is PieceColor.WHITE else char


def _on_board(pos: Point2D) -> bool:
    return 0 <= pos.x < _BOARD_SIDE and 0 <= pos.y < _BOARD_SIDE


@dataclass(frozen=True)
class Move:
    """A piece moving from ``origin`` to ``target``."""

    origin: Point2D
    target: Point2D
    color: PieceColor
    piece: PieceType
    move_type: MoveType = MoveType.NORMAL

    def __post_init__(self) -> None:
        for pos in (self.origin, self.target):
            if not _on_board(pos):
                raise ValueError(f"{pos} is not a board square")

    @property
    def piece_data(self) -> PieceData:
        return PieceData(self.color, self.piece)


def generate_list_of_moves(piece: PieceData, origin: Point2D, targets: Iterable[Point2D]) -> list[Move]:
    """Normal moves of ``piece`` from ``origin`` to each of ``targets``."""
    return [Move(origin, target, piece.color, piece.piece, MoveType.NORMAL) for target in targets]


class WorldState:
    """An 8x8 board, two squares per byte, and the side to move."""

    def __init__(self) -> None:
        self.turn = PieceColor.WHITE
        self._cells = bytearray(_CELL_BYTES)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WorldState):
            return NotImplemented
        return self.turn is other.turn and self._cells == other._cells

    __hash__ = None  # type: ignore[assignment]

    def end_turn(self) -> None:
        """Pass the move to the other side."""
        self.turn = self.turn.opponent

    def piece_at(self, pos: Point2D) -> PieceData:
        """The piece on ``pos``; off the board this is ``PieceData.wrong()``."""
        if not _on_board(pos):
            return PieceData.wrong()
        value = self._cells[(pos.y * _BOARD_SIDE + pos.x) // 2]
        nibble = value & 0b1111 if pos.x % 2 == 0 else value >> 4
        return PieceData.unpack(nibble)

    def set_piece(self, piece: PieceData, pos: Point2D) -> None:
        """Put ``piece`` on ``pos``, replacing whatever was there."""
        if not _on_board(pos):
            raise IndexError(f"{pos} is not a board square")
        packed = piece.pack()
        index = (pos.y * _BOARD_SIDE + pos.x) // 2
        value = self._cells[index]
        if pos.x % 2 == 0:
            value = (value & 0b11110000) | packed
        else:
            value = (value & 0b00001111) | (packed << 4)
        self._cells[index] = value

    def move(self, origin: Point2D, target: Point2D) -> None:
        """Move the piece on ``origin`` to ``target`` and end the turn."""
        moving = self.piece_at(origin)
        captured = self.piece_at(target)
        if moving.piece is PieceType.WRONG:
            raise IllegalMoveError(f"Wrong FROM piece at position: {origin}")
        if moving.color is not self.turn:
            raise IllegalMoveError(f"Piece color does not match the turn at position: {origin}")
        if captured.piece is PieceType.WRONG:
            raise IllegalMoveError(f"Target is off the board: {target}")
        if captured.piece is not PieceType.NONE and captured.color is moving.color:
            raise IllegalMoveError(f"WRONG piece at position: {origin}")
        self.set_piece(moving, target)
        self.set_piece(PieceData.empty(), origin)
        self.end_turn()

    def reset(self) -> None:
        """Set up the starting position with white to move."""
        self.turn = PieceColor.WHITE
        self._cells = bytearray(_CELL_BYTES)
        back_rank = (
            PieceType.ROOK,
            PieceType.KNIGHT,
            PieceType.BISHOP,
            PieceType.QUEEN,
            PieceType.KING,
            PieceType.BISHOP,
            PieceType.KNIGHT,
            PieceType.ROOK,
        )
        for column, kind in enumerate(back_rank):
            self.set_piece(PieceData(PieceColor.WHITE, kind), Point2D(column, 0))
            self.set_piece(PieceData(PieceColor.WHITE, PieceType.PAWN), Point2D(column, 1))
            self.set_piece(PieceData(PieceColor.BLACK, PieceType.PAWN), Point2D(column, 6))
            self.set_piece(PieceData(PieceColor.BLACK, kind), Point2D(column, 7))

    def copy(self) -> WorldState:
        duplicate = WorldState()
        duplicate.turn = self.turn
        duplicate._cells = bytearray(self._cells)
        return duplicate

    def __str__(self) -> str:
        rows = [
            str(line + 1)
            + "".join(" " + self.piece_at(Point2D(column, line)).to_char() for column in range(_BOARD_SIDE))
            + "\n"
            for line in range(_BOARD_SIDE - 1, -1, -1)
        ]
        rows.append("  A B C D E F G H\n")
        return "".join(rows)


@dataclass
class MoveState:
    """A board reached by a sequence of moves, with its evaluation."""

    state: WorldState
    moves: list[Move] = field(default_factory=list)
    score: int = 0

    def __lt__(self, other: MoveState) -> bool:
        if not isinstance(other, MoveState):
            return NotImplemented
        return self.score < other.score

    @property
    def current_move(self) -> Move:
        return self.moves[-1]

    @property
    def first_move(self) -> Move:
        return self.moves[0]