"""
Conway's Game of Life - Visual Implementation with Pygame

Controls:
    LEFT CLICK  - Toggle cell / press a button
    N           - Next generation
    SPACE       - Start/Pause auto-run
    R           - Reset to the initial grid
    G           - Add glider at mouse position
    UP/DOWN     - Faster/Slower auto-run
    ESC         - Quit

Usage: python -m game_of_life.visual [cell_size] [interval_ms]
"""
import sys

import numpy as np
import pygame

from game_of_life.grid import ALIVE, CoordinateOutOfRangeError
from game_of_life.simulation import DEFAULT_INTERVAL_MS, Simulation

BLACK = (0, 0, 0)          # background
GRAY = (40, 40, 40)        # grid lines
DARK = (30, 30, 30)        # bars
GREEN = (0, 255, 100)      # alive cells
YELLOW = (255, 255, 0)     # paused UI
WHITE = (255, 255, 255)    # text
BUTTON = (70, 70, 90)      # button face

BUTTON_BAR_HEIGHT = 40
STATUS_BAR_HEIGHT = 35
BUTTON_WIDTH = 90
BUTTON_GAP = 10
BUTTON_LABELS = ("Next", "Start", "Pause", "Reset")
INTERVAL_STEP_MS = 50
FPS = 60


class GameOfLifeApp:
    def __init__(self, simulation: Simulation | None = None, cell_size: int = 60):
        pygame.init()  # init pygame modules

        self.simulation = simulation or Simulation()
        self.cell_size = cell_size  # cell size in pixels

        self.grid_pixel_width = self.simulation.cols * cell_size
        self.grid_pixel_height = self.simulation.rows * cell_size
        min_width = len(BUTTON_LABELS) * (BUTTON_WIDTH + BUTTON_GAP) + BUTTON_GAP
        self.window_width = max(self.grid_pixel_width, min_width, 480)
        self.window_height = self.grid_pixel_height + BUTTON_BAR_HEIGHT + STATUS_BAR_HEIGHT

        self.screen = pygame.display.set_mode((self.window_width, self.window_height))  # main window
        pygame.display.set_caption("Conway's Game of Life")  # window title

        self.buttons = self.layout_buttons()

        self.clock = pygame.time.Clock()                 # frame timing
        self.font = pygame.font.Font(None, 28)           # main UI font
        self.small_font = pygame.font.Font(None, 22)     # button font

    def layout_buttons(self) -> dict[str, pygame.Rect]:
        top = self.grid_pixel_height + (BUTTON_BAR_HEIGHT - 30) // 2
        return {
            label: pygame.Rect(BUTTON_GAP + i * (BUTTON_WIDTH + BUTTON_GAP), top, BUTTON_WIDTH, 30)
            for i, label in enumerate(BUTTON_LABELS)
        }

    def screen_to_cell(self, sx: int, sy: int) -> tuple[int, int] | None:
        if not (0 <= sx < self.grid_pixel_width and 0 <= sy < self.grid_pixel_height):
            return None  # outside the grid area
        return sy // self.cell_size, sx // self.cell_size  # pixel -> (row, col)

    def button_at(self, sx: int, sy: int) -> str | None:
        for label, rect in self.buttons.items():
            if rect.collidepoint(sx, sy):
                return label
        return None

    def press(self, label: str):
        if label == "Next":
            self.simulation.step()
        elif label == "Start":
            self.simulation.start()
        elif label == "Pause":
            self.simulation.pause()
        elif label == "Reset":
            self.simulation.reset()

    def click(self, sx: int, sy: int):
        label = self.button_at(sx, sy)
        if label is not None:
            self.press(label)
            return
        cell = self.screen_to_cell(sx, sy)
        if cell is not None:
            self.simulation.toggle(*cell)

    def add_glider(self, sx: int, sy: int):
        cell = self.screen_to_cell(sx, sy)
        if cell is None:
            return
        try:
            self.simulation.stamp("glider", *cell)
        except CoordinateOutOfRangeError:
            pass  # no room for the glider here

    def change_interval(self, delta_ms: int):
        runner = self.simulation.runner
        runner.set_interval(runner.interval_ms + delta_ms)

    def draw(self):
        grid = self.simulation.grid
        self.screen.fill(BLACK)  # clear window

        for x in range(0, self.grid_pixel_width + 1, self.cell_size):
            pygame.draw.line(self.screen, GRAY, (x, 0), (x, self.grid_pixel_height))  # vertical
        for y in range(0, self.grid_pixel_height + 1, self.cell_size):
            pygame.draw.line(self.screen, GRAY, (0, y), (self.grid_pixel_width, y))  # horizontal

        for row, col in zip(*np.nonzero(grid == ALIVE)):  # draw only alive cells
            rect = pygame.Rect(
                col * self.cell_size + 1,
                row * self.cell_size + 1,
                self.cell_size - 1,
                self.cell_size - 1
            )
            pygame.draw.rect(self.screen, GREEN, rect)  # filled cell

    def draw_ui(self):
        pygame.draw.rect(self.screen, DARK, (0, self.grid_pixel_height, self.window_width, BUTTON_BAR_HEIGHT))
        for label, rect in self.buttons.items():
            pygame.draw.rect(self.screen, BUTTON, rect, border_radius=4)
            text = self.small_font.render(label, True, WHITE)
            self.screen.blit(text, text.get_rect(center=rect.center))

        pygame.draw.rect(self.screen, DARK, (0, self.window_height - STATUS_BAR_HEIGHT, self.window_width, STATUS_BAR_HEIGHT))  # status bar

        sim = self.simulation
        status = "RUNNING" if sim.running else "PAUSED"  # state label
        color = GREEN if sim.running else YELLOW         # state color
        text = self.font.render(
            f"[{status}]  Gen: {sim.generation}  Cells: {int(np.sum(sim.grid))}  Every: {sim.runner.interval_ms} ms",
            True,
            color
        )
        self.screen.blit(text, (10, self.window_height - 28))  # status text

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.QUIT:
            return False  # close window

        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False  # quit

            elif event.key == pygame.K_n:
                self.simulation.step()  # single step

            elif event.key == pygame.K_SPACE:
                if self.simulation.running:
                    self.simulation.pause()
                else:
                    self.simulation.start()

            elif event.key == pygame.K_r:
                self.simulation.reset()  # back to the initial grid

            elif event.key == pygame.K_g:
                self.add_glider(*pygame.mouse.get_pos())  # stamp glider

            elif event.key == pygame.K_UP:
                self.change_interval(-INTERVAL_STEP_MS)  # speed up

            elif event.key == pygame.K_DOWN:
                self.change_interval(INTERVAL_STEP_MS)  # slow down

        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.click(*event.pos)

        return True  # keep running

    def handle_events(self) -> bool:
        return all([self.handle_event(event) for event in pygame.event.get()])

    def run(self):
        while self.handle_events():  # main loop
            elapsed_ms = self.clock.tick(FPS)  # frame timing
            self.simulation.advance(elapsed_ms)  # auto-run steps that came due

            self.draw()
            self.draw_ui()

            pygame.display.flip()  # swap buffers

        pygame.quit()  # clean exit


def main():
    cell_size = int(sys.argv[1]) if len(sys.argv) > 1 else 60     # CLI zoom
    interval = int(sys.argv[2]) if len(sys.argv) > 2 else DEFAULT_INTERVAL_MS  # CLI speed

    GameOfLifeApp(Simulation(interval_ms=interval), cell_size).run()  # start app


if __name__ == "__main__":
    main()  # entry point
