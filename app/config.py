# all the settings live here so we dont scatter magic numbers everywhere

CAMERA_WIDTH = 1280
CAMERA_HEIGHT = 720
CAMERA_INDEX = 0
MAX_FAILED_READS = 30  # give up after this many bad frames in a row

# mediapipe
MAX_HANDS = 2
DETECTION_CONFIDENCE = 0.5
TRACKING_CONFIDENCE = 0.5
DETECTION_WIDTH = 640     # process at lower res for speed

# pinch calibration - normal pinch is around 0.05-0.1, open hand is 0.2-0.3
# (normalized image units, so it doesnt depend on camera resolution)
PINCH_MIN_DISTANCE = 0.05
PINCH_MAX_DISTANCE = 0.25
MIN_SIZE = 0.2
MAX_SIZE = 2.0
INITIAL_SIZE = 1.0

# lower = smoother but slower, must be in (0, 1]
SMOOTHING_FACTOR = 0.15

# seconds between color changes while the left index finger touches the sphere
COLOR_CHANGE_COOLDOWN = 0.5

# neon palette (RGB). first entry is the starting color
NEON_COLORS = [
    (255, 0, 255),    # magenta
    (0, 255, 255),    # cyan
    (255, 51, 0),     # neon orange
    (57, 255, 20),    # neon green
    (255, 0, 153),    # neon pink
    (0, 255, 0),      # lime
    (255, 102, 0),    # neon orange-red
    (255, 255, 0),    # yellow
]

# scene
SPHERE_RADIUS = 2.0          # world units at scale 1.0
CAMERA_Z = 5.0               # scene camera distance from origin
CAMERA_FOV = 75.0            # vertical field of view, degrees
WORLD_SCALE = 10.0           # normalized frame -> world units for hit testing
ROTATION_SPEED_X = 0.003     # radians per render tick
ROTATION_SPEED_Y = 0.008
SPHERE_SEGMENTS = 16         # wireframe rings / meridians

# ui
SHOW_FPS = True
SHOW_LANDMARKS = True
UI_FONT_SCALE = 0.6

# logging - control events (color changes etc) go to their own file
EVENT_LOG_PATH = "control_events.log"
LOG_LEVEL = "INFO"
