CELL_SIZE = 4
# Extra horizontal space to the right of the board for the frame index readout.
READOUT_MARGIN = 100
FRAME_RATE = 5  # frames advanced per second while playing

# Readout text is centred this far from the right edge and the top edge.
READOUT_OFFSET = 50
READOUT_TEXT_SIZE = 30
READOUT_COLOR = (0, 0, 0)

BACKGROUND_COLOR = (255, 255, 255)
EMPTY_CELL_COLOR = (255, 255, 255, 255)
# Faint black outline drawn around every cell.
CELL_STROKE_COLOR = (0, 0, 0, 10)
CELL_STROKE_WIDTH = 1

# arcade.key codes for the lowercase letters equal their ASCII codes.
KEY_TOGGLE_PAUSE = ord("p")
KEY_STEP_BACK = ord("h")
KEY_STEP_FORWARD = ord("l")
# Shift, Ctrl, Alt, Windows and Command (arcade.key.MOD_*). Caps Lock and Num Lock pass through.
BLOCKING_MODIFIERS = 1 | 2 | 4 | 32 | 64

DEFAULT_SNAPSHOT_PATH = "data.js"
WINDOW_TITLE = "Board Playback"
