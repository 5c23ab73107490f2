from collections import namedtuple

from app.config import INITIAL_SIZE, MIN_SIZE, MAX_SIZE, NEON_COLORS, SPHERE_RADIUS


# read-only copy handed to the renderer once per tick
TargetSnapshot = namedtuple(
    "TargetSnapshot",
    ["current_size", "target_size", "color", "world_position", "world_radius"],
)


class TargetState:
    """
    keeps track of the sphere we are controlling - size, color, position.
    the gesture engine is the only thing that writes to it, the renderer
    just reads snapshots.
    """

    def __init__(self, size=INITIAL_SIZE, color=None, world_position=(0.0, 0.0, 0.0),
                 base_radius=SPHERE_RADIUS):
        size = self._clamp(size)
        self.current_size = size
        self.target_size = size
        self.color = color if color is not None else NEON_COLORS[0]
        self.world_position = tuple(world_position)
        self.base_radius = base_radius

    @staticmethod
    def _clamp(size):
        return max(MIN_SIZE, min(MAX_SIZE, size))

    @property
    def world_radius(self):
        """geometric radius times current scale"""
        return self.base_radius * self.current_size

    def set_target_size(self, size):
        self.target_size = self._clamp(size)

    def set_current_size(self, size):
        self.current_size = self._clamp(size)

    def set_color(self, color):
        self.color = tuple(color)

    def snapshot(self):
        return TargetSnapshot(
            self.current_size,
            self.target_size,
            self.color,
            self.world_position,
            self.world_radius,
        )
