"""
constants.py: Centralized default configuration for the game.
"""

# -------- Timing Config --------
FPS = 60                        # Display refresh / simulation steps per second
MAX_FRAME_MS = 250              # Longest frame fed to the score accumulator (ms)

# -------- Game World Config --------
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
PLAYER_X = 120                  # Fixed player X position (left edge)
PLAYER_SIZE = 30                # Player is a square

# -------- Physics Config (units / tick) --------
GRAVITY_ACCEL = 0.5             # Added to velocity every tick, times gravity sign
FLIP_IMPULSE = 4.0              # Velocity magnitude right after a flip
TERMINAL_VELOCITY = 9.0         # Sign-preserving clamp on velocity

# -------- Obstacle Config --------
OBSTACLE_WIDTH = 40
OBSTACLE_SPEED = 3.0            # Horizontal speed (units/tick), never scaled
SPAWN_INTERVAL_TICKS = 180      # Spawn every 180 ticks (3.0 seconds at 60 FPS)
BASE_GAP = 150.0                # Gap height at score 0
GAP_DECAY = 0.05                # Gap shrink per point of score
MIN_GAP = 75.0                  # Floor for the gap height

# -------- Scoring Config --------
SCORE_INTERVAL_MS = 100         # One point per 100 ms of live play

# -------- Render Config --------
RAIL_THICKNESS = 4
ROTATION_PER_VELOCITY = 5.0     # Degrees of tilt per unit of velocity
MAX_ROTATION = 45.0

BG_COLOR = (18, 20, 38)
RAIL_COLOR = (90, 110, 160)
OBSTACLE_COLOR = (230, 80, 110)
PLAYER_COLOR = (120, 220, 255)
DEAD_PLAYER_COLOR = (110, 110, 120)
TEXT_COLOR = (240, 240, 250)
DIM_TEXT_COLOR = (170, 175, 200)
OVERLAY_COLOR = (0, 0, 0, 160)

# -------- Audio Config --------
SAMPLE_RATE = 22050
FLIP_UP_FREQ = 660              # Tone when gravity now points up
FLIP_DOWN_FREQ = 440            # Tone when gravity now points down
FLIP_TONE_MS = 60
CRASH_FREQ = 110
CRASH_TONE_MS = 280
VOLUME = 0.3

# -------- Storage Config --------
DB_FILE = "gravity_flip.db"
