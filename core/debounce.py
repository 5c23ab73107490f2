from app.config import COLOR_CHANGE_COOLDOWN


class DebounceGate:
    """
    rate limits a contact signal into discrete trigger events.

    fires when contact is seen and more than `cooldown` seconds passed
    since the last fire. contact doesnt have to be released in between,
    holding it just re-fires once per window.
    """

    def __init__(self, cooldown=COLOR_CHANGE_COOLDOWN):
        self.cooldown = cooldown
        self.last_trigger_time = None  # None until the first fire

    def update(self, contact, now):
        """returns True if this call fires a trigger"""
        if not contact:
            return False
        if self.last_trigger_time is not None and now - self.last_trigger_time <= self.cooldown:
            return False
        self.last_trigger_time = now
        return True

    def reset(self):
        self.last_trigger_time = None
