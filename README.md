# mohrechess

A two-player chess board for the desktop. You give it a starting position as
text. Two players then take turns in one window and move the pieces with the
mouse.

When a player selects a piece of the side to move, every square that piece may
legally move to gets a mark:

- a green dot marks an ordinary legal move;
- the "good move" mark means the opponent cannot avoid mate: either the move
  mates at once, or every reply can be answered with mate;
- a red dot means the opponent then has a move after which every reply of
  yours can be answered with mate.

A king in check is lit red. The text "check mate" appears when the side in check
has no legal move. The square under the mouse is lit while the window has focus.
The **Reset** button restores the starting position and the side that was to
move at the start.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
mohrechess [position] [--assets DIR]
```

- `position`: a file that holds the starting position. Without it the position
  is read from standard input.
- `--assets DIR`: the directory that holds `images/` and `fonts/`. The default
  is the current directory.

White moves first.

The window needs these images under `images/`: `lighter_blue.png`,
`lighter_green.png`, `lighter_red.png`, `dot_green.png`, `dot_red.png`, `gg.png`
and the piece sheet `chess_peaces.png`. The sheet has two rows of six 426×426
tiles, white on the first row and black on the second, in the order queen, king,
bishop, knight, rook, pawn. The package does not include these images. If one is
missing, start-up fails with `FileNotFoundError`. The fonts `fonts/Wall Notes.otf`
and `fonts/Lobster.ttf` are used when present. Otherwise pygame's default font
is used.

### Position format

A position is 64 cells separated by whitespace, row by row from rank 8 down to
rank 1. Each cell is two characters: the piece kind (`K`, `Q`, `R`, `B`, `N`,
`P`) followed by its colour (`W` or `B`). Write an empty square as `--`. Any text
after the 64th cell is ignored.

```
RB NB BB QB KB BB NB RB
PB PB PB PB PB PB PB PB
-- -- -- -- -- -- -- --
-- -- -- -- -- -- -- --
-- -- -- -- -- -- -- --
-- -- -- -- -- -- -- --
PW PW PW PW PW PW PW PW
RW NW BW QW KW BW NW RW
```

```
mohrechess start.txt
mohrechess < start.txt
```

Each side must have a king. Otherwise `Board` raises `ValueError`.

## Using it from Python

The rules work without a window:

```python
from mohrechess.loader import parse_position
from mohrechess.board import Board

with open("start.txt") as f:
    position = parse_position(f.read())
board = Board(position, "W")
print(board.targets(4, 6))      # [(4, 5), (4, 4)]: squares the e2 pawn may reach
board.click(4, 6)               # selects the pawn
board.click(4, 4)               # plays e2-e4 and returns True; Black is to move
print(board.is_checkmated("B"))
```

A `Board` takes squares as `(column, row)` pairs, where row 0 is rank 8. It has
these members:

- `click(col, row)` selects a piece, or plays the selected piece's move.
- `select(col, row)` selects a piece directly.
- `targets(col, row)` returns the squares a piece may move to.
- `move(from_col, from_row, to_col, to_row)` moves a piece unconditionally.
- `mate(depth, piece)` and `defend(depth, piece)` are the hint searches. Depth 4
  fills `good_targets` and `bad_targets`.
- `is_checkmated(color)` tells whether a side is checkmated.
- `reset()` restores the starting position and turn.

`mohrechess.core` holds the board model: `Position`, `Piece`, `Pawn`, `King`,
`Move`, `square_name` and `square_coords`. `mohrechess.pieces` adds `Queen`,
`Bishop`, `Knight` and `Rook`, and `make_piece` creates a piece of any kind.
`mohrechess.loader` has `parse_position` and `read_position`.
`mohrechess.gui` has the window (`App`, `Assets`) and the `main` command.

## What it does not do

- There is no castling, no en passant and no pawn promotion. A pawn that
  reaches the last rank stays a pawn.
- The game does not end on checkmate or stalemate. A message is shown, and the
  board still accepts clicks.
- There is no move history, no undo of played moves beyond **Reset**, and no
  saving of games.
- There is no computer opponent. The searches only mark squares for the player.