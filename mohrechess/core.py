"""Board coordinates, moves, positions and the pawn and king pieces."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import count
from typing import Iterable

EMPTY = "--"
WHITE = "W"
BLACK = "B"
SIZE = 8

_FILES = "abcdefgh"
_RANKS = "87654321"


def _on_board(row: int, col: int) -> bool:
    return 0 <= row < SIZE and 0 <= col < SIZE


def square_name(row: int, col: int) -> str:
    """Return the algebraic name of a square given as grid row and column."""
    if not _on_board(row, col):
        raise ValueError(f"square ({row}, {col}) is off the board")
    return _FILES[col] + _RANKS[row]


def square_coords(name: str) -> tuple[int, int]:
    """Return the grid (row, column) of an algebraic square name."""
    if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
        raise ValueError(f"invalid square name: {name!r}")
    return _RANKS.index(name[1]), _FILES.index(name[0])


@dataclass(frozen=True)
class Move:
    """A move: where it starts, the piece moved, where it ends, what stood there."""

    origin: str
    piece: str
    target: str
    captured: str = EMPTY

    def __str__(self) -> str:
        return self.origin + self.piece + self.target + self.captured


class Position:
    """An 8x8 grid of two-letter cells (kind then colour) plus the pieces on it."""

    def __init__(self, grid: Iterable[Iterable[str]]) -> None:
        rows = [list(row) for row in grid]
        if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
            raise ValueError("a position needs an 8x8 grid")
        for row in rows:
            for cell in row:
                if not isinstance(cell, str) or len(cell) != 2:
                    raise ValueError(f"invalid cell: {cell!r}")
        self.grid: list[list[str]] = rows
        self._pieces: dict[str, list[Piece]] = {WHITE: [], BLACK: []}

    def __getitem__(self, square: tuple[int, int]) -> str:
        row, col = square
        return self.grid[row][col]

    def __setitem__(self, square: tuple[int, int], cell: str) -> None:
        row, col = square
        self.grid[row][col] = cell

    def _side(self, color: str) -> list[Piece]:
        try:
            return self._pieces[color]
        except KeyError:
            raise ValueError(f"unknown colour: {color!r}") from None

    def pieces_of(self, color: str) -> tuple[Piece, ...]:
        """Return every piece of one colour, captured ones included."""
        return tuple(self._side(color))

    def add_piece(self, piece: Piece) -> None:
        """Register a piece with the side of its colour."""
        self._side(piece.color).append(piece)

    def clear_pieces(self) -> None:
        """Forget every registered piece."""
        for side in self._pieces.values():
            side.clear()


class Piece:
    """A piece standing on a position; it is live while its cell still names it."""

    def __init__(self, color: str, kind: str, position: Position, row: int, col: int) -> None:
        self.color = color
        self.kind = kind
        self.position = position
        self.row = row
        self.col = col

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.color!r}, {self.kind!r}, row={self.row}, col={self.col})"

    @property
    def _code(self) -> str:
        return self.kind + self.color

    def _on_its_square(self) -> bool:
        return self.position[self.row, self.col] == self._code

    def is_checked(self) -> bool:
        """Tell whether any piece of the other side attacks a king of this side."""
        if self.color == BLACK:
            attackers = self.position.pieces_of(WHITE)
        elif self.color == WHITE:
            attackers = self.position.pieces_of(BLACK)
        else:
            return False
        return any(piece.gives_check() for piece in attackers)

    def legal_moves(self) -> list[Move]:
        """Return the moves that do not leave this side in check."""
        return []

    def gives_check(self) -> bool:
        """Tell whether this piece attacks an enemy king."""
        return False

    def do_move(self, move: Move) -> None:
        """Play a move of this piece on the position."""
        origin = square_coords(move.origin)
        target = square_coords(move.target)
        self.position[origin] = EMPTY
        self.position[target] = move.piece
        self.row, self.col = target

    def undo_move(self, move: Move) -> None:
        """Take back a move of this piece, restoring any captured piece."""
        origin = square_coords(move.origin)
        target = square_coords(move.target)
        self.position[origin] = move.piece
        self.position[target] = move.captured
        self.row, self.col = origin

    def _attempt(self, row: int, col: int) -> Move | None:
        """Try a move to (row, col); return it unless it leaves this side in check."""
        move = Move(
            square_name(self.row, self.col),
            self.position[self.row, self.col],
            square_name(row, col),
            self.position[row, col],
        )
        self.do_move(move)
        try:
            checked = self.is_checked()
        finally:
            self.undo_move(move)
        return None if checked else move

    def _step_moves(self, offsets: Iterable[tuple[int, int]]) -> list[Move]:
        if not self._on_its_square():
            return []
        moves = []
        start_row, start_col = self.row, self.col
        for d_row, d_col in offsets:
            row, col = start_row + d_row, start_col + d_col
            if not _on_board(row, col):
                continue
            cell = self.position[row, col]
            if cell[1] != self.color and cell[0] != "K":
                move = self._attempt(row, col)
                if move is not None:
                    moves.append(move)
        return moves

    def _step_checks(self, offsets: Iterable[tuple[int, int]]) -> bool:
        if not self._on_its_square():
            return False
        for d_row, d_col in offsets:
            row, col = self.row + d_row, self.col + d_col
            if _on_board(row, col):
                cell = self.position[row, col]
                if cell[1] != self.color and cell[0] == "K":
                    return True
        return False

    def _slide_moves(self, directions: Iterable[tuple[int, int]]) -> list[Move]:
        if not self._on_its_square():
            return []
        moves = []
        start_row, start_col = self.row, self.col
        for d_row, d_col in directions:
            for step in count(1):
                row, col = start_row + d_row * step, start_col + d_col * step
                if not _on_board(row, col) or self.position[row, col][0] == "K":
                    break
                cell = self.position[row, col]
                if cell[1] != self.color:
                    move = self._attempt(row, col)
                    if move is not None:
                        moves.append(move)
                if cell[1] != "-":
                    break
        return moves

    def _slide_checks(self, directions: Iterable[tuple[int, int]]) -> bool:
        if not self._on_its_square():
            return False
        for d_row, d_col in directions:
            for step in count(1):
                row, col = self.row + d_row * step, self.col + d_col * step
                if not _on_board(row, col):
                    break
                cell = self.position[row, col]
                if cell[1] != self.color and cell[0] == "K":
                    return True
                if cell[1] != "-":
                    break
        return False


_KING_OFFSETS = ((-1, -1), (-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0), (1, 1))


class Pawn(Piece):
    """A pawn; black moves down the grid, white moves up."""

    def _direction(self) -> int:
        return 1 if self.color == BLACK else -1

    def legal_moves(self) -> list[Move]:
        if not self._on_its_square():
            return []
        moves: list[Move] = []
        row, col = self.row, self.col
        step = self._direction()
        ahead = row + step

        def add(target_row: int, target_col: int) -> None:
            move = self._attempt(target_row, target_col)
            if move is not None:
                moves.append(move)

        if 0 <= ahead < SIZE and self.position[ahead, col][0] == "-":
            add(ahead, col)
        for d_col in (1, -1):
            if _on_board(ahead, col + d_col):
                cell = self.position[ahead, col + d_col]
                if cell[0] != "-" and cell[1] != self.color and cell[0] != "K":
                    add(ahead, col + d_col)
        on_start_rank = (self.color == BLACK and row == 1) or (self.color == WHITE and row == 6)
        if (
            on_start_rank
            and self.position[ahead, col][0] == "-"
            and self.position[row + 2 * step, col][1] == "-"
        ):
            add(row + 2 * step, col)
        return moves

    def gives_check(self) -> bool:
        if not self._on_its_square():
            return False
        ahead = self.row + self._direction()
        for d_col in (1, -1):
            if _on_board(ahead, self.col + d_col):
                cell = self.position[ahead, self.col + d_col]
                if cell[0] == "K" and cell[1] != self.color:
                    return True
        return False


class King(Piece):
    """A king, moving one square in any direction."""

    def legal_moves(self) -> list[Move]:
        return self._step_moves(_KING_OFFSETS)

    def gives_check(self) -> bool:
        return self._step_checks(_KING_OFFSETS)