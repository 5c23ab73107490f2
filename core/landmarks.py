"""
hand landmark types.

a Frame is just a list of HandObservation, 0-2 per camera frame.
everything is normalized (x, y in 0-1 relative to the camera frame),
exactly what mediapipe hands out.
"""
from collections import namedtuple


# landmark indices (mediapipe hand model)
THUMB_TIP = 4
INDEX_TIP = 8

NUM_LANDMARKS = 21

LEFT = "Left"
RIGHT = "Right"

# skeleton connections, used for drawing
HAND_CONNECTIONS = [
    # thumb
    (0, 1), (1, 2), (2, 3), (3, 4),
    # index
    (0, 5), (5, 6), (6, 7), (7, 8),
    # middle
    (0, 9), (9, 10), (10, 11), (11, 12),
    # ring
    (0, 13), (13, 14), (14, 15), (15, 16),
    # pinky
    (0, 17), (17, 18), (18, 19), (19, 20),
    # palm
    (5, 9), (9, 13), (13, 17),
]

Landmark = namedtuple("Landmark", ["x", "y", "z"])
HandObservation = namedtuple("HandObservation", ["handedness", "landmarks"])


def make_observation(handedness, points):
    """build a HandObservation from any iterable of (x, y, z) triples"""
    landmarks = tuple(Landmark(float(x), float(y), float(z)) for x, y, z in points)
    if len(landmarks) != NUM_LANDMARKS:
        raise ValueError(f"expected {NUM_LANDMARKS} landmarks, got {len(landmarks)}")
    return HandObservation(handedness, landmarks)


def observations_from_result(result, max_hands=2):
    """
    turn a mediapipe HandLandmarkerResult into a Frame.

    only needs .hand_landmarks and .handedness on the result, so tests
    can pass a plain namespace. hands beyond max_hands are dropped.
    """
    frame = []
    if result is None or not result.hand_landmarks:
        return frame

    for hand_lms, handedness_list in zip(result.hand_landmarks, result.handedness):
        if len(frame) >= max_hands:
            break
        label = handedness_list[0].category_name
        frame.append(make_observation(label, [(lm.x, lm.y, lm.z) for lm in hand_lms]))
    return frame
