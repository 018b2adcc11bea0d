# config.py
# All configurable constants and settings

import os

# Optional debug logging toggle – when enabled, log_debug() appends a
# timestamped trace to LOG_FILE_PATH. Disabled by default for normal play.
LOG_ENABLED = bool(int(os.getenv("PORTFOLIO_RUNNER_LOG_ENABLED", "0")))
LOG_FILE_PATH = os.getenv("PORTFOLIO_RUNNER_LOG_FILE", "logs/debug.txt")

# Default world seed; None means a fresh random world every launch.
_seed = os.getenv("PORTFOLIO_RUNNER_SEED")
SEED = int(_seed) if _seed else None

# Window / viewport dimensions
WIDTH = 1280
HEIGHT = 720

# Frames per second (one simulation tick per frame)
FPS = 60

# Player
PLAYER_SPAWN = (150.0, 300.0)
PLAYER_WIDTH = 32
PLAYER_HEIGHT = 48
PLAYER_SPEED = 5.0         # units per tick while a direction is held
GRAVITY = 0.8              # added to velocity_y every tick
JUMP_POWER = -16.0         # velocity_y right after a jump
LANDING_BAND = 30          # depth below a platform top that still counts as landing

# Scoring
DISTANCE_PER_TICK = 0.1    # distance gained per tick of rightward movement
COIN_SCORE = 50
DEATH_MARGIN = 100         # fall this far below the viewport to die

# Interaction
INTERACT_TOLERANCE = 10    # max |player bottom - platform top| to use a door

# World generation
GENERATION_MARGIN = 500    # keep this much world ahead of the viewport
GENERATION_BATCH = 3       # synthesis steps per top-up
INITIAL_RANDOM_STEPS = 50
TUTORIAL_FRONTIER = 1000.0
PLATFORM_GAP = (100, 200)
PLATFORM_Y = (350, 470)
PLATFORM_WIDTH = (90, 160)
PLATFORM_HEIGHT = 30
COIN_SIZE = 20
COIN_ABOVE_CHANCE = 0.5
COIN_ABOVE_OFFSET = 50
COIN_ARC_CHANCE = 0.3
COIN_ARC_MIN_GAP = 120
COIN_ARC_CEILING = 400
COIN_ARC_OFFSET = 60
SCATTERED_COINS = 30

# Clouds
CLOUD_COUNT = 15
CLOUD_TARGET = 20
CLOUD_PARALLAX = 0.5

# Door ids of the info panels
DOOR_IDS = ("about", "skills", "experience", "projects")

# Key bindings (pygame K_* constant suffixes)
KEY_BINDINGS = {
    "left": ("a", "left"),
    "right": ("d", "right"),
    "jump": ("space",),
    "interact": ("e",),
    "respawn": ("r",),
    "toggle": ("g", "return"),
    "exit": ("escape",),
}

# Settings dictionary for the CLI overrides
settings_data = {
    "WIDTH": WIDTH,
    "HEIGHT": HEIGHT,
    "FPS": FPS,
    "SEED": SEED,
}
