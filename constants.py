# --- Constants ---
WIDTH, HEIGHT = 800, 600
FPS = 60
DT = 1.0 / FPS

# --- Simulation defaults ---
GRAVITY = 981.0          # px/s^2, screen space (down is +y)
RESTITUTION = 0.6
LAUNCH_SPEED = 600.0
LAUNCH_SPREAD = 0.05
PROJECTILE_RADIUS = 6
PICK_DISTANCE = 12.0

# --- Colors ---
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (255, 0, 0)
BLUE = (0, 0, 255)
GREY = (125, 125, 125)

LAUNCHER_COLOR = (128, 0, 128)  # Purple for the launcher
LAUNCHER_SIZE = 10
