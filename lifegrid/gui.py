"""Windowed front end: shows the board and lets the mouse edit it."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Any

import pygame

from lifegrid.app import SCREEN_X, SCREEN_Y, AppExit, Key, LifeApp
from lifegrid.grid import MapError, load_map
from lifegrid.image import Image

USAGE = "Usage: <filename>"
WINDOW_TITLE = "RTv1"
FONT_SIZE = 24

_KEY_MAP = {
    pygame.K_ESCAPE: Key.ESC,
    pygame.K_LEFT: Key.ARROW_LEFT,
    pygame.K_UP: Key.ARROW_UP,
    pygame.K_RIGHT: Key.ARROW_RIGHT,
    pygame.K_DOWN: Key.ARROW_DOWN,
}


def translate_event(event: Any) -> tuple | None:
    """Turn a pygame event into an application call.

    The result is a tuple of the LifeApp method name followed by its
    arguments, or None for events the application does not handle.
    """
    if event.type == pygame.QUIT:
        return ("on_destroy",)
    if event.type == pygame.KEYDOWN:
        return ("key_down", int(_KEY_MAP.get(event.key, event.key)))
    if event.type == pygame.MOUSEMOTION:
        x, y = event.pos
        return ("mouse_move", x, y)
    if event.type == pygame.MOUSEBUTTONDOWN:
        x, y = event.pos
        return ("mouse_down", event.button, x, y)
    if event.type == pygame.MOUSEBUTTONUP:
        x, y = event.pos
        return ("mouse_up", event.button, x, y)
    return None


def dispatch_event(app: LifeApp, event: Any) -> bool:
    """Feed a pygame event to the application; return whether it was handled.

    AppExit raised by the application propagates to the caller.
    """
    action = translate_event(event)
    if action is None:
        return False
    name, *args = action
    getattr(app, name)(*args)
    return True


def _image_surface(image: Image) -> pygame.Surface:
    fmt = "BGRA" if sys.byteorder == "little" else "ARGB"
    data = image._pixels.tobytes()
    return pygame.image.frombuffer(data, (image.width, image.height), fmt).copy()


def _rgb(color: int) -> tuple[int, int, int]:
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def main(argv: Sequence[str] | None = None) -> int:
    """Open a window on the map named in argv and run it until closed."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print(USAGE)
        return -3
    try:
        grid = load_map(args[0])
    except (OSError, MapError):
        print("ERROR")
        return -2

    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_X, SCREEN_Y))
        pygame.display.set_caption(WINDOW_TITLE)
        font = pygame.font.Font(None, FONT_SIZE)

        def on_render(app: LifeApp) -> None:
            image = app.image
            screen.blit(_image_surface(image), (image.x0, image.y0))
            for label in app.status_text():
                text = font.render(label.text, True, _rgb(label.color))
                screen.blit(text, (label.x, label.y))
            pygame.display.flip()

        app = LifeApp(grid, on_render=on_render)
        app.render()
        clock = pygame.time.Clock()
        try:
            while True:
                for event in pygame.event.get():
                    dispatch_event(app, event)
                app.tick()
                clock.tick(1000)
        except AppExit as exc:
            print(exc.message)
            return exc.code
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())