import pygame
import pytest

from lifegrid.app import AppExit, Key, LifeApp
from lifegrid.grid import Grid
from lifegrid.gui import dispatch_event, main, translate_event


def _app(line_len=2, lines=2):
    return LifeApp(Grid(line_len=line_len, lines=lines), width=20, height=20, now=0.0)


def test_translate_escape_maps_to_app_key():
    event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)
    assert translate_event(event) == ("key_down", int(Key.ESC))


def test_translate_space_passes_through():
    event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE)
    assert translate_event(event) == ("key_down", int(Key.SPACE))


def test_translate_arrow_key():
    event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_UP)
    assert translate_event(event) == ("key_down", int(Key.ARROW_UP))


def test_translate_mouse_events():
    down = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(3, 4))
    up = pygame.event.Event(pygame.MOUSEBUTTONUP, button=3, pos=(5, 6))
    move = pygame.event.Event(pygame.MOUSEMOTION, pos=(7, 8), rel=(0, 0), buttons=(0, 0, 0))
    assert translate_event(down) == ("mouse_down", 1, 3, 4)
    assert translate_event(up) == ("mouse_up", 3, 5, 6)
    assert translate_event(move) == ("mouse_move", 7, 8)


def test_translate_quit_and_unknown():
    assert translate_event(pygame.event.Event(pygame.QUIT)) == ("on_destroy",)
    wheel = pygame.event.Event(pygame.MOUSEWHEEL, x=0, y=1)
    assert translate_event(wheel) is None


def test_dispatch_unknown_event_returns_false():
    app = _app()
    wheel = pygame.event.Event(pygame.MOUSEWHEEL, x=0, y=1)
    assert dispatch_event(app, wheel) is False


def test_dispatch_escape_exits():
    app = _app()
    event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)
    with pytest.raises(AppExit) as info:
        dispatch_event(app, event)
    assert info.value.code == 1
    assert info.value.message == "Exited program succesfully using ESC."


def test_dispatch_quit_exits():
    app = _app()
    with pytest.raises(AppExit) as info:
        dispatch_event(app, pygame.event.Event(pygame.QUIT))
    assert info.value.message == "Exited program succesfully using [X]"


def test_dispatch_space_toggles_pause():
    app = _app()
    event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE)
    assert dispatch_event(app, event) is True
    assert app.paused is True
    dispatch_event(app, event)
    assert app.paused is False


def test_dispatch_r_clears_grid():
    app = _app()
    app.grid.set_cell(1, 1, 1)
    dispatch_event(app, pygame.event.Event(pygame.KEYDOWN, key=pygame.K_r))
    assert not app.grid.is_alive(1, 1)


def test_dispatch_left_click_paints_and_suspends():
    app = _app()
    dispatch_event(app, pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(5, 5)))
    assert app.grid.is_alive(0, 0)
    assert app.active is False
    dispatch_event(app, pygame.event.Event(pygame.MOUSEBUTTONUP, button=1, pos=(5, 5)))
    assert app.active is True
    assert app.mouse.button == 0


def test_dispatch_right_drag_erases():
    app = _app()
    app.grid.set_cell(0, 1, 1)
    dispatch_event(app, pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=(2, 2)))
    move = pygame.event.Event(pygame.MOUSEMOTION, pos=(15, 5), rel=(0, 0), buttons=(0, 0, 1))
    dispatch_event(app, move)
    assert not app.grid.is_alive(0, 1)
    assert (app.mouse.x, app.mouse.y) == (15, 5)


def test_dispatch_scroll_changes_speed():
    app = _app()
    before = app.speed
    dispatch_event(app, pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=4, pos=(1, 1)))
    assert app.speed == before + 1
    dispatch_event(app, pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=5, pos=(1, 1)))
    assert app.speed == before
    assert app.mouse.button == 0


def test_main_usage(capsys):
    assert main([]) == -3
    assert "Usage: <filename>" in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == -2
    assert "ERROR" in capsys.readouterr().out


def test_main_empty_map(tmp_path, capsys):
    path = tmp_path / "empty.txt"
    path.write_text("")
    assert main([str(path)]) == -2
    assert "ERROR" in capsys.readouterr().out