"""The message sidebar: cursor position, the clear button and the equation history."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

import pygame

from quackplot.constants import SCREEN_HEIGHT

SIDEBAR_COLOR = (192, 192, 192)
TEXT_COLOR = (117, 0, 20)
VERTICAL_LINE_SPACING = 5.0
LEFT_MARGIN = 10.0
TOP_MARGIN = 10.0
MAX_HISTORY_ITEMS = 30
BLANK_TEXT = "BLANK"


class _Font(Protocol):
    def render(self, text: str, antialias: bool, color: tuple[int, int, int]) -> pygame.Surface:
        ...


class Sidebar:
    """A column of text items drawn beside the graph.

    Item 0 holds free text (the cursor position), item 1 is the clear button and
    the items after it are equations read from the history file.
    """

    def __init__(self, left: float, width: float, history_path: str | Path = "history.txt") -> None:
        self.left = left
        self.width = width
        self.history_path = Path(history_path)
        self.items: list[str] = ["sidebar sample text", "CLEAR LIST"]
        self.entry_bounds: list[pygame.Rect] = []
        words = self._read_history().split()
        self.items.extend(words[:MAX_HISTORY_ITEMS])

    def _read_history(self) -> str:
        if not self.history_path.exists():
            self.history_path.touch()
            return ""
        return self.history_path.read_text()

    def reset_items(self) -> None:
        """Drop every equation, keeping the first two fixed items."""
        del self.items[2:]

    def update(self) -> None:
        """Append the newest equation of the history file once it has been written.

        The file is read word by word, at most one word more than there are items;
        the last word read is added when more words were seen than items are held.
        """
        text = self._read_history()
        words = text.split()
        ends_with_space = text[-1:].isspace()
        history_len = 1
        last = ""
        for i in range(len(self.items) + 1):
            history_len += 1
            if i >= len(words):
                break
            last = words[i]
            if i == len(words) - 1 and not ends_with_space:
                break
        if last and history_len > len(self.items):
            self.items.append(last)

    def __getitem__(self, index: int) -> str:
        return self.items[self._check(index)]

    def __setitem__(self, index: int, value: str) -> None:
        self.items[self._check(index)] = value

    def __len__(self) -> int:
        return len(self.items)

    def _check(self, index: int) -> int:
        if not 0 <= index < len(self.items):
            raise IndexError(f"sidebar index {index} out of range")
        return index

    def draw(self, surface: pygame.Surface, font: _Font) -> None:
        """Draw the sidebar and record the bounds of any item not seen before."""
        pygame.draw.rect(surface, SIDEBAR_COLOR, pygame.Rect(self.left, 0, self.width, SCREEN_HEIGHT))
        height = TOP_MARGIN
        for index, item in enumerate(self.items):
            blank = not item
            rendered = font.render(BLANK_TEXT if blank else item, True, TEXT_COLOR)
            position = (self.left + LEFT_MARGIN, height)
            bounds = rendered.get_rect(topleft=(int(position[0]), int(position[1])))
            height += rendered.get_height() + VERTICAL_LINE_SPACING
            if len(self.entry_bounds) < len(self.items) and index >= len(self.entry_bounds):
                self.entry_bounds.append(bounds)
            if not blank:
                surface.blit(rendered, bounds)