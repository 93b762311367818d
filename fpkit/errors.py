class FpkitError(Exception):
    """Base class for errors raised by fpkit itself."""


class InvalidChunkSizeError(FpkitError, ValueError):
    def __init__(self, size):
        self.size = size
        super().__init__("Chunk size must be at least 1, got %r" % (size,))


class ZeroStepError(FpkitError, ValueError):
    def __init__(self):
        super().__init__("Step cannot be zero")


class StepDirectionMismatchError(FpkitError, ValueError):
    def __init__(self, start, end, step):
        self.start = start
        self.end = end
        self.step = step
        super().__init__("Step %r moves away from %r when starting at %r" % (step, end, start))


class InvalidTupleError(FpkitError, TypeError):
    def __init__(self, row):
        self.row = row
        super().__init__("Expected a sequence row, got %s" % type(row).__name__)


class RetryFailedError(FpkitError):
    """retry was asked to make fewer than one attempt."""

    def __init__(self, attempts):
        self.attempts = attempts
        super().__init__("Retry made no attempts (max attempts: %r)" % (attempts,))


__all__ = (
    "FpkitError",
    "InvalidChunkSizeError",
    "InvalidTupleError",
    "RetryFailedError",
    "StepDirectionMismatchError",
    "ZeroStepError",
)
