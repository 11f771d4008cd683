FOLD_THRESHOLD = 1_000_000_000


class StepCounter:
    """
    Two-tier step count. `bounded` counts steps since the last fold and never
    exceeds `threshold`; `accumulated` holds everything folded so far and has
    no upper limit.
    """

    def __init__(self, threshold=FOLD_THRESHOLD):
        if threshold < 1:
            raise ValueError(f"Fold threshold must be positive, got {threshold}")
        self.threshold = threshold
        self.bounded = 0
        self.accumulated = 0

    def tick(self):
        """Count one step. Returns True when the bounded counter is due for a fold."""
        self.bounded += 1
        return self.bounded >= self.threshold

    def fold(self):
        self.accumulated += self.bounded
        self.bounded = 0
        return self.accumulated

    @property
    def total(self):
        return self.accumulated + self.bounded
