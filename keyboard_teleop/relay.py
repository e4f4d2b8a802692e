ENGAGED_MSG = 'motors engaged'
DISENGAGED_MSG = 'motors disengaged'


class RelayToggle:
    """Motor relay switch, flipped on every trigger."""

    def __init__(self):
        self.engaged = False

    def trigger(self):
        """Flip the relay and return ``(state, announcement)``."""
        self.engaged = not self.engaged
        return self.engaged, ENGAGED_MSG if self.engaged else DISENGAGED_MSG
