# --- LOGICAL WORLD (The Arena Contract) ---
ARENA_HALF_EXTENT = 500.0     # Arena spans [-500, 500] on both axes
ARENA_PADDING = 10.0          # Logical margin drawn around the arena

# --- RENDERING (The Display Contract) ---
CANVAS_SIZE_PX = 1020
PIXELS_PER_UNIT = CANVAS_SIZE_PX / (2 * (ARENA_HALF_EXTENT + ARENA_PADDING)) # 1.0

# --- INFECTION STATE IDs ---
STATE_HEALTHY = 0
STATE_INFECTED = 1
STATE_RECOVERED = 2
STATE_DEAD = 3

# --- DISPLAY COLOR NAMES ---
COLOR_NAME_HEALTHY   = "green"
COLOR_NAME_INFECTED  = "red"
COLOR_NAME_RECOVERED = "blue"
COLOR_NAME_DEAD      = "gray"

# --- COLORS (BGR format for OpenCV) ---
COLOR_BG     = (0, 0, 0)          # Black
COLOR_BORDER = (90, 90, 90)       # Dark Gray
COLOR_OUTLINE = (40, 40, 40)

COLORS_BGR = {
    COLOR_NAME_HEALTHY:   (0, 200, 0),      # Green
    COLOR_NAME_INFECTED:  (0, 0, 255),      # Red
    COLOR_NAME_RECOVERED: (255, 120, 0),    # Blue
    COLOR_NAME_DEAD:      (150, 150, 150),  # Gray
}

# --- SIMULATION ENGINE CONFIG ---
DT = 0.02          # Time step (seconds), also the tick cadence

# --- AGENT CONSTANTS ---
AGENT_SPEED = 200.0          # units/second, fixed at spawn
AGENT_DIAMETER = 10.0        # units, never mutated

# --- RUN DEFAULTS ---
DEFAULT_NUM_AGENTS = 100
DEFAULT_NUM_INFECTED = 1
DEFAULT_DURATION = 30.0      # seconds

# --- CHART ---
CHART_HISTORY = 500          # Ticks kept for the infection chart
CHART_EVERY = 5              # Redraw the chart every N frames
