import time
import random
import logging
from collections import namedtuple

from app.config import NEON_COLORS
from core.landmarks import LEFT, RIGHT, THUMB_TIP, INDEX_TIP
from core.geometry import distance_3d, is_within_target
from core.calibration import map_pinch_to_size
from core.smoothing import SizeSmoother
from core.debounce import DebounceGate
from core.target_state import TargetState

logger = logging.getLogger(__name__)


# what one frame produced. size is None when no right hand was seen,
# color is None unless a color change fired this frame.
ControlUpdate = namedtuple(
    "ControlUpdate",
    ["size", "color", "right_hand_active", "left_hand_active"],
)


def describe_frame(frame):
    """short status line for the overlay"""
    count = len(frame) if frame else 0
    if count == 0:
        return "No hands detected"
    if count == 1:
        return "1 hand detected"
    return f"{count} hands detected"


class GestureEngine:
    """
    takes the hands seen in a frame and turns them into sphere controls.

    right hand: thumb-index pinch distance sets the sphere size.
    left hand: touching the sphere with the index tip changes its color,
    at most once per cooldown window.
    """

    def __init__(self, state=None, smoother=None, color_gate=None, palette=NEON_COLORS, rng=None):
        self.state = state if state is not None else TargetState()
        self.smoother = smoother if smoother is not None else SizeSmoother()
        self.color_gate = color_gate if color_gate is not None else DebounceGate()
        self.palette = list(palette)
        self._rng = rng if rng is not None else random.Random()

        self.right_hand_active = False
        self.left_hand_active = False

    def process(self, frame, now=None):
        """
        main method. run once per detector frame.

        hands are handled in the order the detector reports them, and a
        right hand writes its smoothed size before any later left hand
        is hit-tested. if the detector ever reports two right hands,
        each one steps the smoother and the last target wins. with no
        right hand the size still takes one step toward the last
        target, so the sphere keeps easing instead of freezing when
        the hand drops out.
        """
        if now is None:
            now = time.monotonic()

        self.right_hand_active = False
        self.left_hand_active = False
        new_color = None

        for hand in frame or ():
            if hand.handedness == RIGHT:
                self._handle_size_hand(hand)
                self.right_hand_active = True
            elif hand.handedness == LEFT:
                if self._handle_color_hand(hand, now):
                    new_color = self.state.color
            else:
                logger.debug("ignoring hand with unknown handedness %r", hand.handedness)

        if not self.right_hand_active:
            self._relax_size()

        size = self.state.current_size if self.right_hand_active else None
        return ControlUpdate(size, new_color, self.right_hand_active, self.left_hand_active)

    def pinch_distance(self, hand):
        """thumb tip to index tip, in raw normalized coords"""
        return distance_3d(hand.landmarks[THUMB_TIP], hand.landmarks[INDEX_TIP])

    def _relax_size(self):
        self.state.set_current_size(self.smoother.step(self.state.current_size, self.state.target_size))

    def _handle_size_hand(self, hand):
        self.state.set_target_size(map_pinch_to_size(self.pinch_distance(hand)))
        self._relax_size()

    def _handle_color_hand(self, hand, now):
        """returns True if the color changed"""
        if not is_within_target(hand.landmarks[INDEX_TIP], self.state):
            return False

        self.left_hand_active = True
        if not self.color_gate.update(True, now):
            return False

        color = self.next_color()
        self.state.set_color(color)
        logger.info("color changed to %s", color)
        return True

    def next_color(self):
        """uniform pick from the palette. repeats are allowed"""
        return self._rng.choice(self.palette)
