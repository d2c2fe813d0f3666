import pygame
import pytest

from game_of_life.simulation import Simulation
from game_of_life.visual import GameOfLifeApp


@pytest.fixture
def app():
    app = GameOfLifeApp(Simulation(), cell_size=20)
    yield app
    pygame.quit()


def key(code):
    return pygame.event.Event(pygame.KEYDOWN, key=code)


def test_window_fits_grid_and_buttons(app):
    assert app.grid_pixel_width == 100
    assert app.grid_pixel_height == 100
    assert app.window_width == 480
    assert set(app.buttons) == {"Next", "Start", "Pause", "Reset"}


def test_screen_to_cell(app):
    assert app.screen_to_cell(25, 45) == (2, 1)
    assert app.screen_to_cell(99, 99) == (4, 4)
    assert app.screen_to_cell(100, 0) is None
    assert app.screen_to_cell(0, 150) is None


def test_click_on_cell_toggles_it(app):
    app.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(5, 5)))
    assert app.simulation.grid[0, 0] == 1
    app.click(5, 5)
    assert app.simulation.grid[0, 0] == 0


def test_buttons_drive_the_simulation(app):
    app.click(*app.buttons["Next"].center)
    assert app.simulation.generation == 1
    app.click(*app.buttons["Start"].center)
    assert app.simulation.running
    app.click(*app.buttons["Pause"].center)
    assert not app.simulation.running
    app.click(*app.buttons["Reset"].center)
    assert app.simulation.generation == 0


def test_keyboard_controls(app):
    assert app.handle_event(key(pygame.K_SPACE))
    assert app.simulation.running
    app.handle_event(key(pygame.K_SPACE))
    assert not app.simulation.running
    app.handle_event(key(pygame.K_n))
    assert app.simulation.generation == 1
    app.handle_event(key(pygame.K_r))
    assert app.simulation.generation == 0
    app.handle_event(key(pygame.K_UP))
    assert app.simulation.runner.interval_ms == 450
    app.handle_event(key(pygame.K_DOWN))
    assert app.simulation.runner.interval_ms == 500


def test_quit_events_stop_the_loop(app):
    assert not app.handle_event(pygame.event.Event(pygame.QUIT))
    assert not app.handle_event(key(pygame.K_ESCAPE))


def test_glider_without_room_is_ignored(app):
    before = app.simulation.grid.copy()
    app.add_glider(90, 90)
    assert (app.simulation.grid == before).all()
    app.add_glider(5, 5)
    assert app.simulation.grid[2, 2] == 1


def test_draw_does_not_fail(app):
    app.draw()
    app.draw_ui()
