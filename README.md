# mobagen

A small 2D game toolkit in plain Python, with no third-party dependencies.

## What is in it

- `mobagen.point2d`: `Point2D`, an immutable, hashable pair of integer
  coordinates with `+`, `-`, neighbour helpers (`up()`, `down()`, `left()`,
  `right()`) and the constants `Point2D.UP`, `DOWN`, `LEFT`, `RIGHT` and
  `INFINITE`. The y axis grows downwards.
- `mobagen.vector2`: `Vector2`, an immutable float vector with arithmetic,
  approximate equality, `rotate`, `rotate_towards`, `angle_degree`,
  `angle_radian`, `magnitude`, `distance`, `normalized`, and constructors such
  as `Vector2.up()`, `from_degree` and `random`.
- `mobagen.rng`: `range_int` and `range_float`, inclusive random ranges drawn
  from the system entropy source; a reversed range raises `ValueError`.
- `mobagen.transform`: `Transform`, a dataclass holding `position`, `scale` and
  `rotation` (the vector pointing up).
- `mobagen.polygon`: `Polygon` and the shapes `circle(sample)`, `square()` and
  `hexagon()`. `drawable_points(transform)` places the vertices and
  `edges(transform)` returns the closed outline as integer line segments.
- `mobagen.color`: `Color32` (one byte per channel, packed as
  `a << 24 | b << 16 | g << 8 | r`, with named constants such as
  `Color32.RED` and `Color32.CORNFLOWER_BLUE`, `lerp`, `light`, `dark` and
  `random`) and `Colorf` (float channels, with `from_hsv`).
- `mobagen.chess`: a chess board and a simple computer opponent:
  - `state`: `WorldState` (board packed four bits per square, side to move,
    `reset`, `move`, `copy`, printable), `PieceData`, `PieceType`,
    `PieceColor`, `Move`, `MoveState` and `IllegalMoveError`;
  - `pieces`: attack and cover squares for bishops, rooks, queens, knights and
    pawns, plus pawn structure checks;
  - `moves`: king moves, `find_king`, `is_in_check`, `list_moves` and
    `list_places_king_cannot_go`;
  - `heuristics`: `material_score` (positive favours white) and
    `distance_to_center`;
  - `search`: `next_move`, which looks three plies ahead;
  - `manager`: `ChessGame`, which keeps the selection, valid moves, undo
    history and score, reacts to board clicks and can let the AI play one side.

## Examples

Points and vectors:

```python
from mobagen.point2d import Point2D
from mobagen.vector2 import Vector2

print(Point2D(1, 2) + Point2D(3, 4))    # {4, 6}
print(Vector2(3.0, 4.0).magnitude())    # 5.0
print(Vector2.up().rotate(90))          # a quarter turn of the up vector
```

Shapes:

```python
from mobagen.polygon import hexagon
from mobagen.transform import Transform
from mobagen.vector2 import Vector2

placed = Transform(position=Vector2(100.0, 100.0), scale=Vector2(20.0, 20.0))
for start, end in hexagon().edges(placed):
    print(start, end)
```

Colours:

```python
from mobagen.color import Color32, Colorf

red = Color32.from_packed(0xFF0000FF)
print(red == Color32.RED, hex(red.packed()))
print(Colorf.from_hsv(0.0, 1.0, 1.0, False))   # pure red
```

Chess:

```python
from mobagen.chess.heuristics import material_score
from mobagen.chess.search import next_move
from mobagen.chess.state import WorldState

state = WorldState()
state.reset()
print(state)                  # the board, white in capitals
print(material_score(state))

move = next_move(state)       # a full three-ply search; may take a moment
state.move(move.origin, move.target)
```

An interactive game:

```python
from mobagen.chess.manager import ChessGame
from mobagen.point2d import Point2D

game = ChessGame()
game.click(Point2D(4, 1))     # select the white pawn on e2
game.release()
game.click(Point2D(4, 3))     # push it to e4
print(game.state, game.score)
game.undo()
```

`WorldState.move` raises `IllegalMoveError` when the piece does not belong to
the side to move or the target holds a piece of the same colour.

## What it does not do

- There is no window, renderer, input handling or frame loop: shapes and
  colours are computed, never drawn, and `ChessGame` must be fed clicks by the
  caller.
- There are no scene objects or game-object lifecycle.
- `mobagen.catchthecat` holds no game yet.
- There is no command to run; everything is used from Python.
- The chess rules are partial: no castling, en passant, promotion, checkmate
  or draw detection.

## Running the tests

Install the `test` extra and run `pytest` from the project root.