"""
sphere overlay.

draws the controlled sphere on top of the camera feed: a translucent
neon disc plus a white wireframe that keeps spinning. the renderer only
reads TargetSnapshot values, rotation and pulse live here.
"""
import math
import time

import cv2
import numpy as np

from app.config import CAMERA_Z, CAMERA_FOV, ROTATION_SPEED_X, ROTATION_SPEED_Y, SPHERE_SEGMENTS

WIREFRAME_COLOR = (255, 255, 255)


def pulse_opacity(t):
    """fill opacity oscillates between 0.48 and 0.5"""
    pulse = 0.1 * math.sin(t * 2) + 0.9
    return 0.4 + 0.1 * pulse


def unit_sphere_lines(segments=SPHERE_SEGMENTS, samples=48):
    """
    latitude rings + longitude meridians of a unit sphere.
    returns an array of shape (lines, samples, 3).
    """
    t = np.linspace(0.0, 2 * np.pi, samples)
    lines = []

    # rings, skipping the poles
    for i in range(1, segments // 2):
        phi = np.pi * i / (segments // 2)
        r = np.sin(phi)
        lines.append(np.stack([r * np.cos(t), np.full_like(t, np.cos(phi)), r * np.sin(t)], axis=1))

    # meridians
    for i in range(segments // 2):
        theta = np.pi * i / (segments // 2)
        lines.append(np.stack([np.sin(t) * np.cos(theta), np.cos(t), np.sin(t) * np.sin(theta)], axis=1))

    return np.array(lines)


def rotation_matrix(rx, ry):
    cx, sx = math.cos(rx), math.sin(rx)
    cy, sy = math.cos(ry), math.sin(ry)
    rot_x = np.array([[1, 0, 0], [0, cx, -sx], [0, sx, cx]])
    rot_y = np.array([[cy, 0, sy], [0, 1, 0], [-sy, 0, cy]])
    return rot_x @ rot_y


class SphereRenderer:

    def __init__(self, width, height, fov=CAMERA_FOV, camera_z=CAMERA_Z):
        self.width = width
        self.height = height
        self.camera_z = camera_z
        # focal length in pixels from the vertical fov
        self.focal = (height / 2) / math.tan(math.radians(fov) / 2)
        self.rotation_x = 0.0
        self.rotation_y = 0.0
        self._lines = unit_sphere_lines()

    def resize(self, width, height, fov=CAMERA_FOV):
        self.width = width
        self.height = height
        self.focal = (height / 2) / math.tan(math.radians(fov) / 2)

    def project(self, points):
        """world (..., 3) -> pixel (..., 2), camera on +z looking at the origin"""
        points = np.asarray(points, dtype=float)
        depth = np.maximum(self.camera_z - points[..., 2], 1e-3)
        sx = self.width / 2 + points[..., 0] * self.focal / depth
        sy = self.height / 2 - points[..., 1] * self.focal / depth
        return np.stack([sx, sy], axis=-1)

    def tick(self):
        """advance the spin one render tick"""
        self.rotation_x += ROTATION_SPEED_X
        self.rotation_y += ROTATION_SPEED_Y

    def draw(self, image, snapshot, now=None):
        if now is None:
            now = time.time()
        self.tick()

        center = np.array(snapshot.world_position, dtype=float)
        radius = snapshot.world_radius

        # translucent fill
        cx, cy = self.project(center)
        depth = max(self.camera_z - center[2], 1e-3)
        r_px = int(radius * self.focal / depth)
        r, g, b = snapshot.color
        overlay = image.copy()
        cv2.circle(overlay, (int(cx), int(cy)), r_px, (b, g, r), -1, cv2.LINE_AA)
        alpha = pulse_opacity(now)
        cv2.addWeighted(overlay, alpha, image, 1 - alpha, 0, image)

        # spinning wireframe
        rot = rotation_matrix(self.rotation_x, self.rotation_y)
        world = self._lines @ rot.T * radius + center
        pix = self.project(world).astype(np.int32)
        cv2.polylines(image, list(pix), False, WIREFRAME_COLOR, 1, cv2.LINE_AA)
        return image
