class FixedPointError(Exception):
    """Base class for failures of the fixed point iteration."""


class IterationLimitExceeded(FixedPointError):
    """Raised when the iterates did not settle within the iteration limit.

    Attributes:
        limit (int): The iteration limit that was exhausted.
        last_value: The last value returned by the transition function.
    """

    def __init__(self, limit, last_value=None):
        super().__init__(
            "Could not converge function after {} iterations".format(limit))
        self.limit = limit
        self.last_value = last_value


class ValueLimitExceeded(FixedPointError):
    """Raised when an iterate grows past the supplied upper bound.

    Attributes:
        max_value: The upper bound that was exceeded.
        last_value: The offending iterate.
    """

    def __init__(self, max_value, last_value=None):
        super().__init__(
            "Maximum value of function reached: {!r} exceeds {!r}".format(
                last_value, max_value))
        self.max_value = max_value
        self.last_value = last_value


class InvalidConfiguration(FixedPointError, ValueError):
    """Raised for arguments which make the iteration meaningless."""
