TICK_MS    = 100
ROUND_MS   = 8000
WARNING_MS = 1500


class RoundClock:
    """
    Countdown driven by fixed ticks. The owner decides when to tick, so a
    clock that is not being ticked is simply paused.
    """
    def __init__(self, duration_ms=ROUND_MS, tick_ms=TICK_MS, warning_ms=WARNING_MS):
        if tick_ms <= 0:
            raise ValueError("tick_ms must be positive")
        self.duration_ms = int(duration_ms)
        self.tick_ms = int(tick_ms)
        self.warning_ms = int(warning_ms)
        self.remaining_ms = self.duration_ms
        self.expired = False

    def reset(self, duration_ms=None):
        if duration_ms is not None:
            self.duration_ms = int(duration_ms)
        self.remaining_ms = self.duration_ms
        self.expired = False

    def tick(self):
        """Advance one tick. Returns True only on the tick that expires the clock."""
        if self.expired:
            return False
        if self.remaining_ms <= self.tick_ms:
            self.remaining_ms = 0
            self.expired = True
            return True
        self.remaining_ms -= self.tick_ms
        return False

    @property
    def warning(self):
        return self.remaining_ms < self.warning_ms
