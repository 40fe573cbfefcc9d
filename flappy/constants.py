"""
constants.py: Centralized configuration for the simulation and the client.
"""

# -------- Timing Config --------
TICK_MS = 16                    # Nominal interval between ticks (~60 Hz)
TICK_TIME = TICK_MS / 1000.0    # Same interval in seconds
RENDER_FPS = 60

# -------- Playfield Config --------
SCREEN_WIDTH = 800              # Default playfield until the window reports its size
SCREEN_HEIGHT = 600

# -------- Bird Config --------
BIRD_X = 100                    # Fixed bird X position
BIRD_WIDTH = 40
BIRD_HEIGHT = 30

# -------- Pipe Config --------
PIPE_WIDTH = 60
PIPE_GAP = 200                  # Vertical opening between top and bottom segments
PIPE_SPEED = 2                  # Pixels per tick
PIPE_SPAWN_THRESHOLD = 250      # Spawn once the newest pipe is this far from the right edge
PIPE_MARGIN = 50                # Minimum top segment height

# -------- Physics Config (Pixels / Tick) --------
GRAVITY = 0.4                   # Added to velocity every tick
JUMP_IMPULSE = -7.0             # Velocity set by a jump

# -------- Presentation Config --------
TILT_FACTOR = 3                 # Degrees per unit of velocity
MAX_TILT = 45                   # Degrees

# -------- Persistence Config --------
DB_FILE = "flappy_highscore.db"
HIGH_SCORE_KEY = "flappyHighScore"
