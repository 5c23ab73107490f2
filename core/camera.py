import cv2
import time
import logging
from app.config import CAMERA_WIDTH, CAMERA_HEIGHT, CAMERA_INDEX, MAX_FAILED_READS

logger = logging.getLogger(__name__)


class Camera:
    """webcam capture. frames come out mirrored so it feels like a mirror"""

    def __init__(self, src=CAMERA_INDEX, width=CAMERA_WIDTH, height=CAMERA_HEIGHT):
        self.cap = None
        self.width = width
        self.height = height
        self.failed_reads = 0

        # try a few times in case the camera is slow to init
        for attempt in range(3):
            self.cap = cv2.VideoCapture(src)
            self.cap.set(cv2.CAP_PROP_FRAME_WIDTH, width)
            self.cap.set(cv2.CAP_PROP_FRAME_HEIGHT, height)
            if self.cap.isOpened():
                break
            logger.warning("camera not ready, retrying (%d/3)...", attempt + 1)
            time.sleep(1)

        if self.cap is None or not self.cap.isOpened():
            raise RuntimeError(
                f"couldnt open webcam {src}. check that it is plugged in, "
                "not used by another app, and that you have permission to use it"
            )

    @property
    def lost(self):
        """true once too many reads in a row have failed"""
        return self.failed_reads >= MAX_FAILED_READS

    def read(self):
        """grab a mirrored frame, return success + frame"""
        if self.cap is None or not self.cap.isOpened():
            return False, None

        ret, frame = self.cap.read()
        if not ret or frame is None:
            self.failed_reads += 1
            if self.failed_reads == MAX_FAILED_READS:
                logger.error("camera stopped responding after %d failed reads", self.failed_reads)
            return False, None

        self.failed_reads = 0
        return True, cv2.flip(frame, 1)

    def release(self):
        if self.cap is not None:
            self.cap.release()
            self.cap = None

    def __del__(self):
        self.release()
