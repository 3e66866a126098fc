"""The sliding and jumping pieces, and a factory for every piece kind."""

from __future__ import annotations

from .core import BLACK, WHITE, King, Move, Pawn, Piece, Position

_ROOK_DIRECTIONS = ((-1, 0), (1, 0), (0, 1), (0, -1))
_BISHOP_DIRECTIONS = ((-1, -1), (1, -1), (1, 1), (-1, 1))
_QUEEN_DIRECTIONS = _ROOK_DIRECTIONS + _BISHOP_DIRECTIONS
_KNIGHT_OFFSETS = ((-1, -2), (-2, -1), (-2, 1), (-1, 2), (1, -2), (2, -1), (2, 1), (1, 2))


class Queen(Piece):
    """A queen, sliding along ranks, files and diagonals."""

    def legal_moves(self) -> list[Move]:
        return self._slide_moves(_QUEEN_DIRECTIONS)

    def gives_check(self) -> bool:
        return self._slide_checks(_QUEEN_DIRECTIONS)


class Bishop(Piece):
    """A bishop, sliding along diagonals."""

    def legal_moves(self) -> list[Move]:
        return self._slide_moves(_BISHOP_DIRECTIONS)

    def gives_check(self) -> bool:
        return self._slide_checks(_BISHOP_DIRECTIONS)


class Knight(Piece):
    """A knight, jumping in an L shape."""

    def legal_moves(self) -> list[Move]:
        return self._step_moves(_KNIGHT_OFFSETS)

    def gives_check(self) -> bool:
        return self._step_checks(_KNIGHT_OFFSETS)


class Rook(Piece):
    """A rook, sliding along ranks and files."""

    def legal_moves(self) -> list[Move]:
        return self._slide_moves(_ROOK_DIRECTIONS)

    def gives_check(self) -> bool:
        return self._slide_checks(_ROOK_DIRECTIONS)


_CLASSES: dict[str, type[Piece]] = {
    "P": Pawn,
    "K": King,
    "Q": Queen,
    "B": Bishop,
    "N": Knight,
    "R": Rook,
}

PIECE_KINDS = frozenset(_CLASSES)
COLORS = frozenset((WHITE, BLACK))


def make_piece(color: str, kind: str, position: Position, row: int, col: int) -> Piece:
    """Create the piece of the given kind letter and colour on a square."""
    if color not in COLORS:
        raise ValueError(f"unknown colour: {color!r}")
    try:
        cls = _CLASSES[kind]
    except KeyError:
        raise ValueError(f"unknown piece kind: {kind!r}") from None
    return cls(color, kind, position, row, col)