"""geometry helpers for hit testing landmarks against the scene"""
import math

from app.config import WORLD_SCALE


def distance_3d(a, b):
    """euclidean distance between two (x, y, z) points"""
    if len(a) != 3 or len(b) != 3:
        raise ValueError(f"need 3d points, got {len(a)} and {len(b)} components")
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    dz = a[2] - b[2]
    return math.sqrt(dx * dx + dy * dy + dz * dz)


def to_world_space(landmark):
    """
    map a normalized landmark onto the scene's z=0 plane.
    y is flipped since image y grows downward but world y is up.
    depth is dropped - the finger is assumed to sit on the camera-facing plane.
    """
    world_x = (landmark[0] - 0.5) * WORLD_SCALE
    world_y = (0.5 - landmark[1]) * WORLD_SCALE
    return (world_x, world_y, 0.0)


def is_within_target(point, target):
    """true if the landmark lands strictly inside the target sphere"""
    return distance_3d(to_world_space(point), target.world_position) < target.world_radius
