# pong/constants.py
import math

APP_TITLE = "Pong++"
FPS = 60

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)

# paddle motion, normalized units / s^2
PADDLE_ACCELERATION = 100.0
PADDLE_DECELERATION = 100.0

# extra reach added to the ball edge when testing paddle overlap
BOUNCE_BUFFER = 0.01
MAX_BOUNCE_ANGLE = 5 * math.pi / 12  # 75 deg

# score text sits this far below the top margin (fraction of window height)
SCORE_TEXT_OFFSET = 0.05
BORDER_THICKNESS = 0.0001  # fraction of window width
