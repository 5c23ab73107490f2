"""
tests for the gesture engine.
we build fake hands with the thumb/index tips where we want them and
check what the engine does to the sphere.
"""
import sys
import os

# make sure we can import from the project root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import unittest
from core.gesture_engine import GestureEngine, ControlUpdate, describe_frame
from core.landmarks import make_observation, THUMB_TIP, INDEX_TIP
from core.target_state import TargetState
from app.config import NEON_COLORS


def make_hand(handedness, thumb=(0.4, 0.5), index=(0.6, 0.5), base=(0.5, 0.8)):
    """
    21 landmarks, all parked at `base` except the thumb and index tips.
    good enough since the engine only looks at those two.
    """
    points = [(base[0], base[1], 0.0)] * 21
    points[THUMB_TIP] = (thumb[0], thumb[1], 0.0)
    points[INDEX_TIP] = (index[0], index[1], 0.0)
    return make_observation(handedness, points)


def pinch_hand(distance):
    """right hand with the tips `distance` apart horizontally"""
    return make_hand("Right", thumb=(0.3, 0.5), index=(0.3 + distance, 0.5))


def touching_hand():
    """left hand with the index tip dead center on the sphere"""
    return make_hand("Left", thumb=(0.45, 0.55), index=(0.5, 0.5))


class FixedRandom:
    """stand-in for random.Random that always picks the same index"""

    def __init__(self, index=3):
        self.index = index
        self.calls = 0

    def choice(self, seq):
        self.calls += 1
        return seq[self.index]


class TestSizeControl(unittest.TestCase):
    """right hand pinch -> sphere size"""

    def test_pinched_closed_hits_floor(self):
        engine = GestureEngine()
        update = engine.process([pinch_hand(0.05)], now=0.0)

        self.assertAlmostEqual(engine.state.target_size, 0.2, places=6)
        self.assertTrue(update.right_hand_active)
        self.assertFalse(update.left_hand_active)
        self.assertIsNone(update.color)

    def test_first_frame_is_smoothed(self):
        engine = GestureEngine()
        update = engine.process([pinch_hand(0.01)], now=0.0)

        # 1.0 + (0.2 - 1.0) * 0.15
        self.assertAlmostEqual(update.size, 0.88)
        self.assertAlmostEqual(engine.state.current_size, 0.88)

    def test_wide_open_hits_ceiling(self):
        engine = GestureEngine()
        engine.process([pinch_hand(0.4)], now=0.0)
        self.assertEqual(engine.state.target_size, 2.0)

    def test_size_converges_with_held_pinch(self):
        engine = GestureEngine()
        for i in range(60):
            engine.process([pinch_hand(0.4)], now=i * 0.033)
        self.assertAlmostEqual(engine.state.current_size, 2.0, places=3)
        self.assertLessEqual(engine.state.current_size, 2.0)

    def test_world_radius_tracks_size(self):
        engine = GestureEngine()
        for i in range(5):
            engine.process([pinch_hand(0.2)], now=i * 0.033)
            self.assertAlmostEqual(engine.state.world_radius, 2 * engine.state.current_size)

    def test_last_right_hand_wins(self):
        engine = GestureEngine()
        engine.process([pinch_hand(0.4), pinch_hand(0.01)], now=0.0)
        self.assertEqual(engine.state.target_size, 0.2)

    def test_each_right_hand_steps_the_smoother(self):
        engine = GestureEngine()
        engine.process([pinch_hand(0.01), pinch_hand(0.01)], now=0.0)
        # 1.0 -> 0.88 -> 0.88 + (0.2 - 0.88) * 0.15
        self.assertAlmostEqual(engine.state.current_size, 0.778)

    def test_idle_frame_steps_once(self):
        engine = GestureEngine()
        engine.process([pinch_hand(0.01)], now=0.0)
        engine.process([], now=0.033)
        self.assertAlmostEqual(engine.state.current_size, 0.778)


class TestIdleFrames(unittest.TestCase):
    """frames with no hands shouldnt change targets or color"""

    def test_empty_frame(self):
        engine = GestureEngine()
        update = engine.process([], now=0.0)

        self.assertEqual(update, ControlUpdate(None, None, False, False))
        self.assertEqual(engine.state.target_size, 1.0)
        self.assertEqual(engine.state.current_size, 1.0)
        self.assertEqual(engine.state.color, NEON_COLORS[0])

    def test_none_frame_treated_as_empty(self):
        engine = GestureEngine()
        update = engine.process(None, now=0.0)
        self.assertFalse(update.right_hand_active)
        self.assertFalse(update.left_hand_active)

    def test_size_keeps_relaxing_when_hand_leaves(self):
        engine = GestureEngine()
        engine.process([pinch_hand(0.01)], now=0.0)
        after_hand = engine.state.current_size

        update = engine.process([], now=0.033)
        self.assertIsNone(update.size)
        self.assertEqual(engine.state.target_size, 0.2)
        self.assertLess(engine.state.current_size, after_hand)
        self.assertGreater(engine.state.current_size, 0.2)

    def test_idle_frames_leave_color_alone(self):
        engine = GestureEngine(rng=FixedRandom())
        engine.process([touching_hand()], now=0.0)
        color = engine.state.color

        for i in range(1, 10):
            engine.process([], now=i * 1.0)
        self.assertEqual(engine.state.color, color)


class TestColorControl(unittest.TestCase):
    """left index on the sphere -> color change, rate limited"""

    def test_touch_changes_color(self):
        rng = FixedRandom(index=3)
        engine = GestureEngine(rng=rng)
        update = engine.process([touching_hand()], now=0.0)

        self.assertEqual(update.color, NEON_COLORS[3])
        self.assertEqual(engine.state.color, NEON_COLORS[3])
        self.assertTrue(update.left_hand_active)
        self.assertFalse(update.right_hand_active)

    def test_cooldown_blocks_rapid_changes(self):
        rng = FixedRandom()
        engine = GestureEngine(rng=rng)

        fired = []
        for t in (0.0, 0.1, 0.3, 0.6):
            update = engine.process([touching_hand()], now=t)
            fired.append(update.color is not None)
            self.assertTrue(update.left_hand_active, "still touching, should stay active")

        self.assertEqual(fired, [True, False, False, True])
        self.assertEqual(rng.calls, 2)

    def test_miss_does_nothing(self):
        rng = FixedRandom()
        engine = GestureEngine(rng=rng)
        # top-left corner is (-5, 5) in world space, way outside radius 2
        hand = make_hand("Left", thumb=(0.05, 0.05), index=(0.0, 0.0))
        update = engine.process([hand], now=0.0)

        self.assertFalse(update.left_hand_active)
        self.assertIsNone(update.color)
        self.assertEqual(rng.calls, 0)

    def test_hit_test_uses_current_size(self):
        engine = GestureEngine(rng=FixedRandom())
        # world x = (0.75 - 0.5) * 10 = 2.5, outside radius 2 but inside radius 4
        hand = make_hand("Left", thumb=(0.7, 0.5), index=(0.75, 0.5))

        self.assertIsNone(engine.process([hand], now=0.0).color)

        engine.state.set_current_size(2.0)
        self.assertIsNotNone(engine.process([hand], now=1.0).color)

    def test_real_rng_picks_from_palette(self):
        engine = GestureEngine()
        update = engine.process([touching_hand()], now=0.0)
        self.assertIn(update.color, NEON_COLORS)


class TestTwoHands(unittest.TestCase):

    def test_both_hands_in_one_frame(self):
        engine = GestureEngine(rng=FixedRandom(index=1))
        update = engine.process([pinch_hand(0.4), touching_hand()], now=0.0)

        self.assertTrue(update.right_hand_active)
        self.assertTrue(update.left_hand_active)
        self.assertEqual(update.color, NEON_COLORS[1])
        self.assertEqual(engine.state.target_size, 2.0)

    def test_touch_sees_size_from_earlier_right_hand(self):
        engine = GestureEngine(rng=FixedRandom())
        # world x = 2.1, outside radius 2.0 but inside 2.3 once the right
        # hand has grown the sphere to 1.15 this frame
        edge = make_hand("Left", thumb=(0.65, 0.5), index=(0.71, 0.5))
        update = engine.process([pinch_hand(0.4), edge], now=0.0)

        self.assertAlmostEqual(engine.state.world_radius, 2.3)
        self.assertTrue(update.left_hand_active)
        self.assertIsNotNone(update.color)

    def test_touch_before_right_hand_uses_old_size(self):
        engine = GestureEngine(rng=FixedRandom())
        edge = make_hand("Left", thumb=(0.65, 0.5), index=(0.71, 0.5))
        update = engine.process([edge, pinch_hand(0.4)], now=0.0)

        self.assertFalse(update.left_hand_active)
        self.assertIsNone(update.color)
        self.assertAlmostEqual(engine.state.current_size, 1.15)

    def test_flags_reset_each_frame(self):
        engine = GestureEngine(rng=FixedRandom())
        engine.process([pinch_hand(0.4), touching_hand()], now=0.0)
        update = engine.process([], now=0.1)
        self.assertFalse(update.right_hand_active)
        self.assertFalse(update.left_hand_active)
        self.assertFalse(engine.right_hand_active)

    def test_unknown_handedness_ignored(self):
        engine = GestureEngine()
        hand = make_hand("Ambidextrous")
        update = engine.process([hand], now=0.0)
        self.assertEqual(update, ControlUpdate(None, None, False, False))

    def test_shared_state(self):
        state = TargetState(size=0.5)
        engine = GestureEngine(state=state)
        engine.process([pinch_hand(0.4)], now=0.0)
        self.assertIs(engine.state, state)
        self.assertEqual(state.target_size, 2.0)

    def test_default_clock(self):
        engine = GestureEngine()
        update = engine.process([touching_hand()])
        self.assertIsNotNone(update.color)


class TestDescribeFrame(unittest.TestCase):

    def test_status_lines(self):
        self.assertEqual(describe_frame([]), "No hands detected")
        self.assertEqual(describe_frame(None), "No hands detected")
        self.assertEqual(describe_frame([pinch_hand(0.1)]), "1 hand detected")
        self.assertEqual(describe_frame([pinch_hand(0.1), touching_hand()]), "2 hands detected")


if __name__ == "__main__":
    unittest.main()
