"""Window layout and sidebar slot numbers shared by the graphing screens."""

SCREEN_WIDTH = 1400
SCREEN_HEIGHT = 800

# The graph occupies four fifths of the window, the sidebar the remaining fifth.
WORK_PANEL = float(SCREEN_WIDTH * 4 // 5)
SIDE_BAR = float(SCREEN_WIDTH * 1 // 5)

SB_MOUSE_POSITION = 0
SB_MOUSE_CLICKED = SB_MOUSE_POSITION + 1
SB_KEY_PRESSED = SB_MOUSE_CLICKED + 1