import logging


class Observer:
    """Receives diagnostics from `fixedpoint.fixed_point`.

    Subclasses override the hooks they care about. The base implementation
    does nothing.
    """

    def on_iteration(self, iteration, x, value):
        """Called after every application of the transition function.

        Args:
            iteration (int): The 1-based index of the iteration.
            x: The input given to the transition function.
            value: The output of the transition function.
        """

    def on_failure(self, error):
        """Called once with the `FixedPointError` about to be raised."""


class LoggingObserver(Observer):
    """Trace every iteration to a `logging.Logger`."""

    def __init__(self, logger=None, level=logging.DEBUG):
        if logger is None:
            logger = logging.getLogger(__name__)
        self.logger = logger
        self.level = level

    def on_iteration(self, iteration, x, value):
        self.logger.log(self.level, "Iteration: %d; x: %r; F(x): %r",
                        iteration, x, value)

    def on_failure(self, error):
        self.logger.log(self.level, "%s. Last value: %r", error,
                        getattr(error, "last_value", None))


class RecordingObserver(Observer):

    def __init__(self):
        self.history = []
        self.error = None

    def on_iteration(self, iteration, x, value):
        self.history.append((iteration, x, value))

    def on_failure(self, error):
        self.error = error
