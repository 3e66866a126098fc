"""The game window: drawing the board, pieces and hints, and handling clicks."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import pygame

from .board import Board
from .core import BLACK, SIZE, WHITE
from .loader import read_position

SQUARE = 100
BOARD_PIXELS = SQUARE * SIZE
WINDOW_SIZE = (1000, 800)
FRAME_RATE = 90
LIGHT_SQUARE = (255, 242, 230)
DARK_SQUARE = (255, 166, 77)
TEXT_COLOR = (255, 255, 255)
RESET_RECT = pygame.Rect(842, 705, 100, 40)
RESET_COLOR = (0, 0, 200)
TILE = 426

_PIECE_ORDER = "QKBNRP"
_SHEET_ROWS = {WHITE: 0, BLACK: 1}


def texture_index(kind: str, color: str) -> int:
    """Return the index of a piece's tile in the sprite sheet, white first."""
    if color not in _SHEET_ROWS or len(kind) != 1 or kind not in _PIECE_ORDER:
        raise ValueError(f"no image for piece {kind!r} of colour {color!r}")
    return _SHEET_ROWS[color] * len(_PIECE_ORDER) + _PIECE_ORDER.index(kind)


def square_at(x: int, y: int) -> tuple[int, int] | None:
    """Return the (column, row) of the square under a window pixel, if any."""
    if 0 <= x < BOARD_PIXELS and 0 <= y < BOARD_PIXELS:
        return x // SQUARE, y // SQUARE
    return None


def in_reset_button(x: int, y: int) -> bool:
    """Tell whether a window pixel lies inside the reset button."""
    return RESET_RECT.left < x < RESET_RECT.right and RESET_RECT.top < y < RESET_RECT.bottom


def _load_image(path: Path) -> pygame.Surface:
    if not path.is_file():
        raise FileNotFoundError(f"missing image: {path}")
    image = pygame.image.load(str(path))
    if pygame.display.get_surface() is not None:
        image = image.convert_alpha()
    return image


class Assets:
    """Images and fonts read from the ``images`` and ``fonts`` directories."""

    def __init__(self, base_dir: str | Path = ".") -> None:
        base = Path(base_dir)
        images = base / "images"
        self.base_dir = base
        self.hover = _load_image(images / "lighter_blue.png")
        self.selected = _load_image(images / "lighter_green.png")
        self.checked = _load_image(images / "lighter_red.png")
        self.dot = _load_image(images / "dot_green.png")
        self.red_dot = _load_image(images / "dot_red.png")
        self.good = _load_image(images / "gg.png")
        sheet = _load_image(images / "chess_peaces.png")
        self._pieces = [
            pygame.transform.smoothscale(
                sheet.subsurface(pygame.Rect(col * TILE, row * TILE, TILE, TILE)),
                (SQUARE, SQUARE),
            )
            for row in range(len(_SHEET_ROWS))
            for col in range(len(_PIECE_ORDER))
        ]
        pygame.font.init()
        self._text_path = base / "fonts" / "Wall Notes.otf"
        self._button_path = base / "fonts" / "Lobster.ttf"
        self._fonts: dict[tuple[Path, int], pygame.font.Font] = {}

    def piece_image(self, kind: str, color: str) -> pygame.Surface:
        """Return the image of a piece, scaled to one square."""
        return self._pieces[texture_index(kind, color)]

    def _font(self, path: Path, size: int) -> pygame.font.Font:
        key = (path, size)
        if key not in self._fonts:
            source = str(path) if path.is_file() else None
            self._fonts[key] = pygame.font.Font(source, size)
        return self._fonts[key]

    def _text_font(self, size: int) -> pygame.font.Font:
        return self._font(self._text_path, size)

    def _button_font(self, size: int) -> pygame.font.Font:
        return self._font(self._button_path, size)


class App:
    """Runs the event loop for a board on a window surface."""

    def __init__(self, board: Board, screen: pygame.Surface, assets: Assets) -> None:
        self.board = board
        self.screen = screen
        self.assets = assets
        self.focused = False
        self._clock = pygame.time.Clock()

    def run(self) -> None:
        """Handle events and redraw until the window is closed."""
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.WINDOWFOCUSLOST:
                    self.focused = False
                elif event.type == pygame.WINDOWFOCUSGAINED:
                    self.focused = True
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    self._handle_click(event.pos)
            self._draw()
            pygame.display.flip()
            self._clock.tick(FRAME_RATE)

    def _handle_click(self, pos: tuple[int, int]) -> None:
        x, y = pos
        if in_reset_button(x, y):
            self.board.reset()
            return
        square = square_at(x, y)
        if square is not None:
            self.board.click(*square)

    def _blit_square(self, image: pygame.Surface, col: int, row: int) -> None:
        self.screen.blit(image, (col * SQUARE, row * SQUARE))

    def _draw(self) -> None:
        screen, board, assets = self.screen, self.board, self.assets
        screen.fill((0, 0, 0))
        for row in range(SIZE):
            for col in range(SIZE):
                color = DARK_SQUARE if (row + col) % 2 == 1 else LIGHT_SQUARE
                screen.fill(color, pygame.Rect(col * SQUARE, row * SQUARE, SQUARE, SQUARE))

        for row, line in enumerate(board.position.grid):
            for col, cell in enumerate(line):
                if cell[0] == "-":
                    continue
                try:
                    image = assets.piece_image(cell[0], cell[1])
                except ValueError:
                    continue
                self._blit_square(image, col, row)

        if self.focused:
            hovered = square_at(*pygame.mouse.get_pos())
            if hovered is not None:
                self._blit_square(assets.hover, *hovered)

        if board.selected is not None:
            for target in board.legal_targets:
                if target in board.good_targets:
                    overlay = assets.good
                elif target in board.bad_targets:
                    overlay = assets.red_dot
                else:
                    overlay = assets.dot
                self._blit_square(overlay, *target)
            self._blit_square(assets.selected, *board.selected)

        for color in (BLACK, WHITE):
            king = board.kings[color]
            if king.is_checked():
                self._blit_square(assets.checked, king.col, king.row)
                if board.is_checkmated(color):
                    text = assets._text_font(25).render("check mate", True, TEXT_COLOR)
                    screen.blit(text, (800, 400))

        turn_name = "White" if board.turn == WHITE else "Black"
        screen.blit(assets._text_font(40).render(turn_name, True, TEXT_COLOR), (800, 350))
        screen.fill(RESET_COLOR, RESET_RECT)
        screen.blit(assets._button_font(40).render("Reset", True, TEXT_COLOR), (850, 700))


def main(argv: list[str] | None = None) -> int:
    """Read a starting position and open the game window."""
    parser = argparse.ArgumentParser(prog="mohrechess", description="Play chess for two at one board.")
    parser.add_argument(
        "position",
        nargs="?",
        help="file holding the starting position (standard input by default)",
    )
    parser.add_argument("--assets", default=".", help="directory holding images/ and fonts/")
    args = parser.parse_args(argv)

    if args.position:
        with open(args.position, encoding="utf-8") as stream:
            position = read_position(stream)
    else:
        position = read_position(sys.stdin)
    board = Board(position, WHITE)

    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption("Chess")
        assets = Assets(args.assets)
        App(board, screen, assets).run()
    finally:
        pygame.quit()
    return 0