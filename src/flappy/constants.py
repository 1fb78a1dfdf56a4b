"""
constants.py: Centralized configuration for the game.
"""

import math

# -------- Timing Config --------
TICK_RATE = 60                  # Simulation steps per second
TICK_TIME = 1.0 / TICK_RATE     # Fixed time step (Delta Time)
RENDER_FPS = 60
MAX_STEPS_PER_FRAME = 5         # Catch-up limit after a stall

# -------- Game World Config --------
SCREEN_WIDTH = 320
SCREEN_HEIGHT = 480
WINDOW_TITLE = "Flappy"

# -------- Bird Config --------
BIRD_X = 50                     # Fixed bird X position
BIRD_WIDTH = 34
BIRD_HEIGHT = 24
RESPAWN_Y = SCREEN_HEIGHT / 2 - BIRD_HEIGHT / 2

# Collision samples, inset from the bird's edges (pixels)
BEAK_INSET = 4
TOP_INSET = 2
BOTTOM_INSET = 2

# -------- Pipe Config --------
PIPE_WIDTH = 52
PIPE_GAP = 100
PIPE_SPEED = 2                  # Pixels per step
PIPE_SPAWN_INTERVAL = 90        # Spawn every 90 steps
PIPE_MARGIN = 75                # Gap never closer than this to top/bottom

# -------- Physics Config (Pixels / Step) --------
GRAVITY = 0.25
FLAP_STRENGTH = -5.0

# -------- Rotation Config --------
MAX_UP_ANGLE = -math.pi / 6
MAX_DOWN_ANGLE = math.pi / 6
ROTATION_LERP = 0.1
ROTATION_VELOCITY_THRESHOLD = 0.5

# -------- Background Config --------
BG_SCROLL_SPEED = 0.5

# -------- Gates (seconds) --------
RESTART_COOLDOWN = 0.5
FLAP_ANIMATION_TIME = 0.5

# -------- Colours --------
SKY_COLOR = (0x70, 0xC5, 0xCE)
PIPE_TOP_COLOR = (0x00, 0x64, 0x00)
PIPE_BOTTOM_COLOR = (0x00, 0x80, 0x00)
BIRD_COLOR = (255, 255, 0)
SCORE_COLOR = (255, 255, 0)
TEXT_COLOR = (255, 255, 255)
GAME_OVER_COLOR = (255, 0, 0)
OUTLINE_COLOR = (0, 0, 0)

# -------- Text --------
SCORE_Y = 50
SCORE_FONT_SIZE = 36
TITLE_FONT_SIZE = 40
MESSAGE_FONT_SIZE = 26
START_TEXT = "Click or Press Space to Start"
GAME_OVER_TEXT = "Game Over!"
RETRY_TEXT = "Click or Space to Retry"

# -------- Assets --------
BIRD_IMAGE = "bird.png"
BIRD_FLAP_IMAGE = "bird2.png"
PIPE_TOP_IMAGE = "pipe2.png"
PIPE_BOTTOM_IMAGE = "pipe.png"
BACKGROUND_IMAGE = "background.png"
FLAP_SOUND = "flap.wav"
SCORE_SOUND = "coingrab.wav"
HIT_SOUND = "hit.wav"
