from app.config import PINCH_MIN_DISTANCE, PINCH_MAX_DISTANCE, MIN_SIZE, MAX_SIZE


def map_pinch_to_size(pinch_distance,
                      min_distance=PINCH_MIN_DISTANCE, max_distance=PINCH_MAX_DISTANCE,
                      min_size=MIN_SIZE, max_size=MAX_SIZE):
    """
    piecewise linear map from thumb-index distance to sphere size.
    clamps to min_size when pinched shut and max_size when fully open.
    """
    if pinch_distance < min_distance:
        return min_size
    if pinch_distance > max_distance:
        return max_size
    return min_size + (pinch_distance - min_distance) * (max_size - min_size) / (max_distance - min_distance)
