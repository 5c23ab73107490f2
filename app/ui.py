import cv2
import time
from app.config import SHOW_FPS, UI_FONT_SCALE

ACTIVE_COLOR = (0, 255, 0)
INACTIVE_COLOR = (150, 150, 150)


class UI:
    """status line, fps, and which hand is doing something"""

    def __init__(self):
        self.prev_time = time.time()
        self.fps = 0
        self._fps_samples = []

    def update_fps(self):
        now = time.time()
        dt = now - self.prev_time
        self.prev_time = now
        if dt > 0:
            self._fps_samples.append(1.0 / dt)
        # average over last 10 samples so it doesnt jump around
        if len(self._fps_samples) > 10:
            self._fps_samples = self._fps_samples[-10:]
        self.fps = int(sum(self._fps_samples) / len(self._fps_samples)) if self._fps_samples else 0

    def _draw_pill(self, frame, text, x, y, color, bg=(40, 40, 40)):
        """draw text with a pill-shaped background, returns the right edge"""
        font = cv2.FONT_HERSHEY_SIMPLEX
        sz, baseline = cv2.getTextSize(text, font, UI_FONT_SCALE, 1)
        pad_x, pad_y = 10, 6
        x1, y1 = x, y - sz[1] - pad_y
        x2, y2 = x + sz[0] + pad_x * 2, y + pad_y + baseline

        overlay = frame.copy()
        cv2.rectangle(overlay, (x1, y1), (x2, y2), bg, -1)
        cv2.addWeighted(overlay, 0.65, frame, 0.35, 0, frame)

        cv2.putText(frame, text, (x + pad_x, y), font, UI_FONT_SCALE, color, 1, cv2.LINE_AA)
        return x2

    def draw_overlay(self, frame, status, update=None):
        self.update_fps()
        h = frame.shape[0]

        x = 8
        if SHOW_FPS:
            fps_color = (0, 255, 0) if self.fps >= 20 else (0, 200, 255) if self.fps >= 12 else (0, 0, 255)
            x = self._draw_pill(frame, f"FPS: {self.fps}", x, 28, fps_color) + 8
        self._draw_pill(frame, status, x, 28, (255, 255, 255))

        if update is not None:
            right = ACTIVE_COLOR if update.right_hand_active else INACTIVE_COLOR
            left = ACTIVE_COLOR if update.left_hand_active else INACTIVE_COLOR
            edge = self._draw_pill(frame, "SIZE (right)", 8, h - 16, right)
            self._draw_pill(frame, "COLOR (left)", edge + 8, h - 16, left)

        return frame
