"""
size smoothing.

the raw pinch reading jumps around a lot from frame to frame, so the
sphere doesnt follow it directly. instead it eases toward the target
a fixed fraction per frame. with alpha=0.15 it covers ~90% of the gap
in about 14 frames no matter how big the gap is.
"""
from app.config import SMOOTHING_FACTOR


class SizeSmoother:
    """single-pole exponential filter: current += (target - current) * alpha"""

    def __init__(self, alpha=SMOOTHING_FACTOR):
        if not 0.0 < alpha <= 1.0:
            raise ValueError(f"smoothing factor must be in (0, 1], got {alpha}")
        self.alpha = alpha

    def step(self, current, target):
        """move one frame toward target. never overshoots"""
        return current + (target - current) * self.alpha

    def __call__(self, current, target):
        return self.step(current, target)
