"""The interactive graphing window: keyboard and mouse handling and the frame loop."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

import pygame

from quackplot.constants import (
    SB_MOUSE_POSITION,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    SIDE_BAR,
    WORK_PANEL,
)
from quackplot.graph_info import GraphInfo
from quackplot.graph_view import GraphView
from quackplot.sidebar import Sidebar
from quackplot.system import Command, System

WINDOW_TITLE = "QuackPad Graphing Calculator"
FRAME_RATE = 60
INVALID_EQUATION = "Invalid equation"
HELP_TEXT = (
    "Help:\nPlus Key: Zoom In\nMinus Key: Zoom Out\nLeft Arrow: Pan Left\n"
    "Right Arrow: Pan Right\nBackslash: Toggle User Input\nEnter: Submit Equation\n"
    "P: Toggle Polar"
)

BACKGROUND = (0, 0, 0)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
MOUSE_DOT_COLOR = (255, 0, 0)
MOUSE_DOT_RADIUS = 5

LABEL_SIZE = 25
HELP_SIZE = 20
SIDEBAR_TEXT_SIZE = 20
HELP_TAB = pygame.Rect(50, 50, 300, 250)
HELP_OUTLINE = 2
TEXT_BOX = pygame.Rect(0, SCREEN_HEIGHT - 30, int(SIDE_BAR + 15), 30)

_BACKSPACE = "\b"
_BACKSLASH = "\\"


def mouse_pos_string(position: tuple[float, float]) -> str:
    """Format a mouse position as ``"(x, y)"``."""
    x, y = position
    return f"({int(x)}, {int(y)})"


class App:
    """Owns the graph state and turns window events into changes to it."""

    def __init__(
        self,
        history_path: str | Path = "history.txt",
        font_path: str | Path | None = "Jokerman-Regular.ttf",
    ) -> None:
        self.history_path = Path(history_path)
        self.font_path = font_path
        self.info = GraphInfo()
        self.system = System()
        self.view = GraphView(self.system.plot)
        self.sidebar = Sidebar(WORK_PANEL, SIDE_BAR, self.history_path)
        self.command = Command.NONE
        self.input = ""
        self.mouse_in = True
        self.mouse_pos: tuple[int, int] = (0, 0)
        self.textbox_visible = False
        self.help_visible = False
        self.running = True
        self.surface: pygame.Surface | None = None
        self._window_open = False
        self._fonts: dict[str, pygame.font.Font] | None = None
        self.system.step(Command.NONE, self.info)

    # ----- events -------------------------------------------------------

    def process_event(self, event: pygame.event.Event) -> None:
        """React to one window event."""
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            self._key_pressed(event.key)
        elif event.type == pygame.TEXTINPUT:
            for char in event.text:
                self._type_char(char)
        elif event.type == pygame.WINDOWENTER:
            self.mouse_in = True
        elif event.type == pygame.WINDOWLEAVE:
            self.mouse_in = False
        elif event.type == pygame.MOUSEMOTION:
            self.mouse_pos = tuple(event.pos)
        elif event.type == pygame.MOUSEBUTTONUP:
            self.mouse_pos = tuple(event.pos)
            if event.button == pygame.BUTTON_LEFT:
                self._left_click(self.mouse_pos)

    def _key_pressed(self, key: int) -> None:
        if key == pygame.K_LEFT:
            self._send(Command.PAN_LEFT)
        elif key == pygame.K_RIGHT:
            self._send(Command.PAN_RIGHT)
        elif key == pygame.K_ESCAPE:
            self.running = False
        elif key == pygame.K_EQUALS:
            if not self.info.input_status:
                self._send(Command.ZOOM_IN)
        elif key == pygame.K_MINUS:
            if not self.info.input_status:
                self._send(Command.ZOOM_OUT)
        elif key == pygame.K_BACKSLASH:
            self.command = Command.TOGGLE_INPUT
            self.info.input_status = not self.info.input_status
            self.textbox_visible = self.info.input_status
        elif key == pygame.K_RETURN:
            self._submit()
        elif key == pygame.K_p:
            if not self.info.input_status:
                self.info.toggle_polar()
        elif key == pygame.K_F1:
            self.help_visible = not self.help_visible
        elif key == pygame.K_BACKSPACE:
            self._type_char(_BACKSPACE)

    def _send(self, command: Command) -> None:
        self.command = command
        self.system.step(command, self.info)

    def _submit(self) -> None:
        with self.history_path.open("a") as history:
            self.command = Command.SUBMIT
            try:
                self.info.set_equation(self.input)
            except ValueError:
                self.input = INVALID_EQUATION
                return
            history.write(self.input + "\n")
        self.input = ""
        self.info.input_status = False
        self.textbox_visible = False

    def _type_char(self, char: str) -> None:
        if ord(char) >= 128:
            return
        if self.input and char == _BACKSPACE:
            self.input = self.input[:-1]
        elif self.info.input_status and char not in (_BACKSPACE, _BACKSLASH):
            self.input += char

    def _left_click(self, pos: tuple[int, int]) -> None:
        entries = list(self.sidebar.entry_bounds)
        for i, bounds in enumerate(entries):
            if len(entries) > 1 and entries[1].collidepoint(pos):
                self.history_path.write_text("")
                self.sidebar.reset_items()
                break
            if i != 0 and i < len(self.sidebar) and bounds.collidepoint(pos):
                self.info.set_equation(self.sidebar[i])

    # ----- frame --------------------------------------------------------

    def update(self) -> None:
        """Advance the state for the next frame."""
        self.system.step(self.command, self.info)
        self.command = Command.NONE
        self.sidebar.update()
        if self.mouse_in:
            self.sidebar[SB_MOUSE_POSITION] = mouse_pos_string(self.mouse_pos)

    def _load_fonts(self) -> dict[str, pygame.font.Font]:
        if self._fonts is None:
            if not pygame.font.get_init():
                pygame.font.init()
            path = None if self.font_path is None else str(self.font_path)
            sidebar_font = pygame.font.Font(path, SIDEBAR_TEXT_SIZE)
            sidebar_font.set_bold(True)
            self._fonts = {
                "label": pygame.font.Font(path, LABEL_SIZE),
                "help": pygame.font.Font(path, HELP_SIZE),
                "sidebar": sidebar_font,
            }
        return self._fonts

    def render(self) -> None:
        """Clear the surface, draw the whole frame and show it."""
        surface = self.surface
        if surface is None:
            raise ValueError("no surface to draw on")
        fonts = self._load_fonts()
        surface.fill(BACKGROUND)
        self.view.draw(surface)
        if self.help_visible:
            top = HELP_TAB.top
            for line in HELP_TEXT.split("\n"):
                rendered = fonts["help"].render(line, True, WHITE)
                surface.blit(rendered, (HELP_TAB.left, top))
                top += rendered.get_height()
        if self.textbox_visible:
            pygame.draw.rect(surface, WHITE, TEXT_BOX)
        if self.help_visible:
            pygame.draw.rect(surface, WHITE, HELP_TAB, HELP_OUTLINE)
        if self.mouse_in:
            pygame.draw.circle(surface, MOUSE_DOT_COLOR, self.mouse_pos, MOUSE_DOT_RADIUS)
        self.sidebar.draw(surface, fonts["sidebar"])
        if self.input:
            surface.blit(fonts["label"].render(self.input, True, BLACK), TEXT_BOX.topleft)
        if self._window_open:
            pygame.display.flip()

    def run(self) -> None:
        """Open the window and run the frame loop until it is closed."""
        pygame.init()
        try:
            self.surface = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
            pygame.display.set_caption(WINDOW_TITLE)
            self._window_open = True
            self._load_fonts()
            pygame.key.start_text_input()
            clock = pygame.time.Clock()
            while self.running:
                for event in pygame.event.get():
                    self.process_event(event)
                self.update()
                self.render()
                clock.tick(FRAME_RATE)
        finally:
            self._window_open = False
            pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the graphing calculator window."""
    parser = argparse.ArgumentParser(prog="quackplot", description=WINDOW_TITLE)
    parser.add_argument("--history", default="history.txt", help="equation history file")
    parser.add_argument("--font", default="Jokerman-Regular.ttf", help="font file to draw text with")
    args = parser.parse_args(argv)
    app = App(args.history, args.font)
    try:
        app.run()
    except FileNotFoundError as exc:
        print(f"Font failed to load: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())