import cv2
import sys
import logging

from core.camera import Camera
from core.hand_tracker import HandTracker
from core.gesture_engine import GestureEngine, describe_frame
from app.scene import SphereRenderer
from app.ui import UI
from app.config import SHOW_LANDMARKS, EVENT_LOG_PATH, LOG_LEVEL

WINDOW_NAME = "Pinch Sphere"

logger = logging.getLogger("pinch_sphere")


def setup_logging():
    """console logging, plus a dedicated file for control events so
    color changes dont get lost in the console noise"""
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    events = logging.getLogger("core.gesture_engine")
    handler = logging.FileHandler(EVENT_LOG_PATH, mode="a")
    handler.setFormatter(logging.Formatter("%(asctime)s  %(message)s", datefmt="%H:%M:%S"))
    events.addHandler(handler)


def fail(message, *resources):
    """startup failures are fatal - one status message and out"""
    logger.error(message)
    print(f"\n{message}")
    for res in resources:
        res.release()
    sys.exit(1)


def main():
    setup_logging()

    try:
        cam = Camera()
    except RuntimeError as e:
        fail(f"Error accessing webcam: {e}")

    try:
        tracker = HandTracker()
    except FileNotFoundError as e:
        fail(f"Model file missing: {e}", cam)
    except Exception as e:
        fail(f"Failed to initialize hand tracker: {e}", cam)

    # grab one frame to get actual resolution (camera might not match config)
    ok, frame = cam.read()
    if not ok:
        tracker.close()
        fail("cant read from camera", cam)
    h, w = frame.shape[:2]

    engine = GestureEngine()
    renderer = SphereRenderer(w, h)
    ui = UI()

    print("Hand tracking ready! Right hand pinch = size, left index on sphere = color. Press 'q' to quit.")
    cv2.namedWindow(WINDOW_NAME, cv2.WINDOW_NORMAL)
    cv2.resizeWindow(WINDOW_NAME, w, h)

    while True:
        ok, frame = cam.read()
        if not ok:
            if cam.lost:
                logger.error("camera feed lost for too long, exiting")
                break
            continue

        if frame.shape[1] != renderer.width or frame.shape[0] != renderer.height:
            renderer.resize(frame.shape[1], frame.shape[0])

        hands = tracker.find_hands(frame)
        update = engine.process(hands)

        # renderer only ever sees a snapshot of the engine's state
        frame = renderer.draw(frame, engine.state.snapshot())
        if SHOW_LANDMARKS:
            frame = tracker.draw_landmarks(frame, hands)
        frame = ui.draw_overlay(frame, describe_frame(hands), update)

        cv2.imshow(WINDOW_NAME, frame)

        key = cv2.waitKey(1) & 0xFF
        if key == ord('q') or key == 27:  # q or ESC
            break

        # also quit if the window X button is clicked
        if cv2.getWindowProperty(WINDOW_NAME, cv2.WND_PROP_VISIBLE) < 1:
            break

    tracker.close()
    cam.release()
    cv2.destroyAllWindows()


if __name__ == "__main__":
    main()
