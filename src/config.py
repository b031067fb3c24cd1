WIDTH = 720
HEIGHT = 720
FULLSCREEN = False
FPS = 60
VSYNC = True
# Longest frame delta fed to the simulation (window drags, first frame)
MAX_FRAME_DT_MS = 50
BACKGROUND_COLOR = (0x1A / 255.0, 0x1A / 255.0, 0x1A / 255.0, 1.0)
GROUND_COLOR = 0x222222
MUTE = False

# Forward speed in px/s
BASE_SPEED = 360.0
MAX_SPEED = 900.0  # cap so difficulty doesn't become impossible
SPEED_RAMP_RATE = 0.015  # px/s gained per elapsed ms

# Ground band below the surface line
GROUND_HEIGHT = 180
GROUND_Y = HEIGHT - GROUND_HEIGHT

# Physics (base values, scaled by the speed factor)
GRAVITY_Y_BASE = 1800.0
JUMP_VEL_BASE = 720.0  # positive magnitude

# Slide timing
SLIDE_MIN_MS = 220  # keyboard hold minimum
TOUCH_SLIDE_MS_BASE = 1000  # swipe-down slide duration at start
TOUCH_SLIDE_MS_MIN = 420  # never shorter than this
TOUCH_SLIDE_EXPONENT = 0.3

# Obstacles
FIRST_SPAWN_DELAY_MS = 900
SPAWN_MIN_GAP_MS = 560
SPAWN_MAX_GAP_MS = 920
GAP_SHRINK_FACTOR = 0.8  # ms of gap removed per px/s above BASE_SPEED
OBSTACLE_SPAWN_X = WIDTH + 120
OBSTACLE_CUTOFF_X = -200
BAR_CLEARANCE = 105  # bar bottom above the surface line

# Player
PLAYER_X = 150
PLAYER_TEXTURE_SIZE = (45, 120)
SLIDE_TINT = 0xDDE8FF

# Swipe controls: swipe up = jump, swipe down = slide
SWIPE_Y_THRESHOLD = 55  # tweak 40-80 for sensitivity
SWIPE_X_TOLERANCE = 80  # ignore mostly-horizontal moves

# HUD / overlay text
UI_FONT = "system-ui, Arial"
UI_ACCENT = 0xF5E6B3
