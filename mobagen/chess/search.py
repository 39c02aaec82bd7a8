"""Choose a move by looking three plies ahead."""

from __future__ import annotations

from mobagen.chess.heuristics import material_score
from mobagen.chess.moves import list_moves
from mobagen.chess.state import Move, MoveState, PieceColor, WorldState

_DEPTH = 3


def next_move(state: WorldState) -> Move:
    """First move of the best-scoring line found three plies deep.

    Lines are ranked from the point of view of the side to move: white
    takes the highest score, black the lowest. When the search runs out
    of moves before full depth, the deepest level reached decides.
    Raises ``ValueError`` when the side to move has no moves at all.
    """
    maximise = state.turn is PieceColor.WHITE
    frontier = [MoveState(state.copy(), [], material_score(state))]
    for _ in range(_DEPTH):
        expanded: list[MoveState] = []
        for node in frontier:
            for move in list_moves(node.state, node.state.turn):
                child = node.state.copy()
                child.move(move.origin, move.target)
                expanded.append(MoveState(child, node.moves + [move], material_score(child)))
        if not expanded:
            break
        expanded.sort(key=lambda candidate: candidate.score, reverse=maximise)
        frontier = expanded
    best = frontier[0]
    if not best.moves:
        raise ValueError("the side to move has no moves")
    return best.first_move