import os
import time
import logging

import cv2
import mediapipe as mp

from app.config import MAX_HANDS, DETECTION_CONFIDENCE, TRACKING_CONFIDENCE, DETECTION_WIDTH
from core.landmarks import HAND_CONNECTIONS, LEFT, THUMB_TIP, INDEX_TIP, observations_from_result

logger = logging.getLogger(__name__)

# tasks API
BaseOptions = mp.tasks.BaseOptions
HandLandmarker = mp.tasks.vision.HandLandmarker
HandLandmarkerOptions = mp.tasks.vision.HandLandmarkerOptions
RunningMode = mp.tasks.vision.RunningMode

# model file sits in the project root
MODEL_PATH = os.path.join(os.path.dirname(os.path.dirname(__file__)), "hand_landmarker.task")

# skeleton colors (BGR)
LEFT_HAND_COLOR = (0, 255, 0)
RIGHT_HAND_COLOR = (255, 255, 0)
TIP_COLOR = (0, 0, 255)


class HandTracker:
    """runs mediapipe hand landmarker on camera frames and hands back a Frame"""

    def __init__(self, max_hands=MAX_HANDS, det_conf=DETECTION_CONFIDENCE, track_conf=TRACKING_CONFIDENCE,
                 model_path=MODEL_PATH):
        if not os.path.exists(model_path):
            raise FileNotFoundError(
                f"cant find {model_path} - download it from "
                "https://storage.googleapis.com/mediapipe-models/"
                "hand_landmarker/hand_landmarker/float16/latest/hand_landmarker.task"
            )

        options = HandLandmarkerOptions(
            base_options=BaseOptions(model_asset_path=model_path),
            running_mode=RunningMode.VIDEO,
            num_hands=max_hands,
            min_hand_detection_confidence=det_conf,
            min_tracking_confidence=track_conf,
        )
        self.landmarker = HandLandmarker.create_from_options(options)
        self.max_hands = max_hands
        self._start_time = time.monotonic()
        self._last_ts = -1
        self._last_frame = []
        self._det_width = DETECTION_WIDTH

    def find_hands(self, image):
        """
        detect hands in a BGR image. returns a list of HandObservation
        with normalized coords, so the downscale doesnt matter.
        """
        h, w = image.shape[:2]
        if w > self._det_width:
            scale = self._det_width / w
            image = cv2.resize(image, (self._det_width, int(h * scale)))
        rgb = cv2.cvtColor(image, cv2.COLOR_BGR2RGB)
        mp_image = mp.Image(image_format=mp.ImageFormat.SRGB, data=rgb)

        # video mode wants strictly increasing timestamps
        ts_ms = max(int((time.monotonic() - self._start_time) * 1000), self._last_ts + 1)
        self._last_ts = ts_ms
        try:
            result = self.landmarker.detect_for_video(mp_image, ts_ms)
        except Exception as e:
            # mediapipe can occasionally choke on weird frames
            # just return last good data instead of crashing
            logger.warning("hand detection failed, reusing last frame: %s", e)
            return self._last_frame

        self._last_frame = observations_from_result(result, self.max_hands)
        return self._last_frame

    def draw_landmarks(self, image, frame):
        """draw the hand skeletons, thumb and index tips highlighted"""
        h, w = image.shape[:2]
        screen = min(w, h)
        line_width = max(2, min(5, screen // 300))
        point_size = max(2, min(8, screen // 250))

        for hand in frame:
            color = LEFT_HAND_COLOR if hand.handedness == LEFT else RIGHT_HAND_COLOR
            pts = [(int(lm.x * w), int(lm.y * h)) for lm in hand.landmarks]

            for start, end in HAND_CONNECTIONS:
                cv2.line(image, pts[start], pts[end], color, line_width)

            for idx, pt in enumerate(pts):
                dot_color = TIP_COLOR if idx in (THUMB_TIP, INDEX_TIP) else color
                cv2.circle(image, pt, point_size, dot_color, -1)

        return image

    def close(self):
        self.landmarker.close()
