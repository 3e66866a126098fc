"""Game state for two players at one board: selection, moves, mate search, reset."""

from __future__ import annotations

from typing import Callable

from .core import BLACK, EMPTY, SIZE, WHITE, Move, Piece, Position, square_coords
from .pieces import make_piece


def _opponent(color: str) -> str:
    return BLACK if color == WHITE else WHITE


def _on_board(col: int, row: int) -> bool:
    return 0 <= col < SIZE and 0 <= row < SIZE


def _target(move: Move) -> tuple[int, int]:
    row, col = square_coords(move.target)
    return col, row


class Board:
    """A position with whose turn it is, the selected square and move hints.

    Squares given to and returned by a board are (column, row) pairs on the
    grid, row 0 being the eighth rank.
    """

    def __init__(self, position: Position, turn: str = WHITE) -> None:
        if turn not in (WHITE, BLACK):
            raise ValueError(f"unknown colour to move: {turn!r}")
        self.position = position
        self.turn = turn
        self.selected: tuple[int, int] | None = None
        self.legal_targets: list[tuple[int, int]] = []
        self.good_targets: list[tuple[int, int]] = []
        self.bad_targets: list[tuple[int, int]] = []
        self._pieces: dict[tuple[int, int], Piece] = {}
        self.kings: dict[str, Piece] = {}
        self._index_pieces()

        self._initial_grid = [row[:] for row in position.grid]
        self._initial_pieces = [
            (piece.color, piece.kind, piece.row, piece.col)
            for color in (WHITE, BLACK)
            for piece in position.pieces_of(color)
        ]
        self._initial_turn = turn

    def _index_pieces(self) -> None:
        self._pieces = {}
        for color in (WHITE, BLACK):
            for piece in self.position.pieces_of(color):
                self._pieces[piece.row, piece.col] = piece
        kings: dict[str, Piece] = {}
        for row in range(SIZE):
            for col in range(SIZE):
                piece = self._pieces.get((row, col))
                if piece is not None and piece.kind == "K":
                    kings[piece.color] = piece
        for color, name in ((WHITE, "white"), (BLACK, "black")):
            if color not in kings:
                raise ValueError(f"the position has no {name} king")
        self.kings = kings

    def move(self, from_col: int, from_row: int, to_col: int, to_row: int) -> None:
        """Move the piece on one square to another, capturing what stood there."""
        if not (_on_board(from_col, from_row) and _on_board(to_col, to_row)):
            raise ValueError("move leaves the board")
        piece = self._pieces.pop((from_row, from_col), None)
        if piece is None:
            raise ValueError(f"no piece on ({from_col}, {from_row})")
        self._pieces.pop((to_row, to_col), None)
        self.position[to_row, to_col] = self.position[from_row, from_col]
        self.position[from_row, from_col] = EMPTY
        self._pieces[to_row, to_col] = piece
        piece.row, piece.col = to_row, to_col

    def _in_check(self, color: str) -> bool:
        return any(piece.gives_check() for piece in self.position.pieces_of(_opponent(color)))

    def _has_moves(self, color: str) -> bool:
        return any(piece.legal_moves() for piece in self.position.pieces_of(color))

    def _is_mated(self, color: str) -> bool:
        return self._in_check(color) and not self._has_moves(color)

    def _any_reply(self, color: str, test: Callable[[], bool]) -> bool:
        """Tell whether some move of a side leads to a position passing the test."""
        for piece in self.position.pieces_of(color):
            for move in piece.legal_moves():
                piece.do_move(move)
                try:
                    if test():
                        return True
                finally:
                    piece.undo_move(move)
        return False

    def _every_reply(self, color: str, test: Callable[[], bool]) -> bool:
        """Tell whether every move of a side passes the test, or it has none and is in check."""
        played = False
        for piece in self.position.pieces_of(color):
            for move in piece.legal_moves():
                played = True
                piece.do_move(move)
                try:
                    if not test():
                        return False
                finally:
                    piece.undo_move(move)
        return played or self._in_check(color)

    def _targets_where(self, piece: Piece, test: Callable[[], bool]) -> list[tuple[int, int]]:
        found = []
        for move in piece.legal_moves():
            piece.do_move(move)
            try:
                if test():
                    found.append(_target(move))
            finally:
                piece.undo_move(move)
        return found

    def mate(self, depth: int, piece: Piece) -> bool:
        """Search for a forced mate by the side of ``piece``.

        Depth 4 stores in ``good_targets`` the moves of ``piece`` after which
        the opponent is mated at once or after any reply, and tells whether
        there is one. Lower depths are the steps of that search.
        """
        own = piece.color
        other = _opponent(own)
        if depth == 1:
            return self._is_mated(other)
        if depth == 2:
            return self._any_reply(own, lambda: self.mate(1, piece))
        if depth == 3:
            return self._every_reply(other, lambda: self.mate(2, piece))
        if depth == 4:
            self.good_targets = self._targets_where(piece, lambda: self.mate(3, piece))
            return bool(self.good_targets)
        raise ValueError(f"unsupported mate search depth: {depth}")

    def defend(self, depth: int, piece: Piece) -> bool:
        """Search for a forced mate against the side of ``piece``.

        Depth 4 stores in ``bad_targets`` the moves of ``piece`` that let the
        opponent force mate within its next two moves, and tells whether
        there is one. Lower depths are the steps of that search.
        """
        own = piece.color
        other = _opponent(own)
        if depth == 0:
            return self._is_mated(own)
        if depth == 1:
            return self._any_reply(other, lambda: self.defend(0, piece))
        if depth == 2:
            return self._every_reply(own, lambda: self.defend(1, piece))
        if depth == 3:
            return self._any_reply(other, lambda: self.defend(2, piece))
        if depth == 4:
            self.bad_targets = self._targets_where(piece, lambda: self.defend(3, piece))
            return bool(self.bad_targets)
        raise ValueError(f"unsupported defence search depth: {depth}")

    def targets(self, col: int, row: int) -> list[tuple[int, int]]:
        """Return the squares the piece on a square may move to."""
        piece = self._pieces.get((row, col))
        if piece is None:
            return []
        return [_target(move) for move in piece.legal_moves()]

    def select(self, col: int, row: int) -> bool:
        """Select a piece of the side to move and work out its move hints."""
        piece = self._pieces.get((row, col))
        if piece is None or piece.color != self.turn:
            return False
        self.selected = (col, row)
        self.mate(4, piece)
        self.defend(4, piece)
        self.legal_targets = self.targets(col, row)
        return True

    def click(self, col: int, row: int) -> bool:
        """Handle a click on a square; return True when it played a move."""
        if not _on_board(col, row):
            return False
        if self.selected is None:
            self.select(col, row)
            return False
        origin = self.selected
        self.selected = None
        targets, self.legal_targets = self.legal_targets, []
        if origin == (col, row) or (col, row) not in targets:
            return False
        self.move(origin[0], origin[1], col, row)
        self.turn = _opponent(self.turn)
        return True

    def is_checkmated(self, color: str) -> bool:
        """Tell whether the king of a side is in check with no move to escape."""
        if color not in self.kings:
            raise ValueError(f"unknown colour: {color!r}")
        return self.kings[color].is_checked() and not self._has_moves(color)

    def reset(self) -> None:
        """Put the board back to the position and turn it started with."""
        position = Position(row[:] for row in self._initial_grid)
        for color, kind, row, col in self._initial_pieces:
            position.add_piece(make_piece(color, kind, position, row, col))
        self.position = position
        self._index_pieces()
        self.turn = self._initial_turn
        self.selected = None
        self.legal_targets = []
        self.good_targets = []
        self.bad_targets = []