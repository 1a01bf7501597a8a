import logging
import numbers

from fixedpoint import converge
from fixedpoint import errors

logger = logging.getLogger(__name__)

DEFAULT_MAX_ITER = 100


def _check_max_iter(max_iter):
    if max_iter is None:
        return DEFAULT_MAX_ITER

    if isinstance(max_iter, bool) or not isinstance(max_iter,
                                                    numbers.Integral):
        raise errors.InvalidConfiguration(
            "Argument `max_iter` must be an integer, got {!r}.".format(
                max_iter))

    # Unsigned numpy scalars would wrap around instead of reaching zero.
    max_iter = int(max_iter)
    if max_iter < 1:
        raise errors.InvalidConfiguration(
            "Argument `max_iter` must be greater than zero, got {}.".format(
                max_iter))
    return max_iter


def fixed_point(func, x0, args, max_iter=None, max_value=None,
                convergence_test=None, observer=None):
    """Find a fixed point of `func` by repeatedly applying `func`.

    Starting from `x0`, compute `x0, func(x0, args), func(func(x0, args),
    args), ...` until two consecutive values are equal, in which case the last
    one is returned.

    NOTE: the iteration limit is checked before the value limit. If both are
    violated by the same iterate, `IterationLimitExceeded` is raised.

    Args:
        func (callable): The function for which we want to find a fixed point.
            `func` should be of type `a, b -> a` where `a` is the type of `x0`
            and `b` the type of `args`.
        x0: The initial value. Only the iterates computed from it are checked
            against `max_value`.
        args: Auxiliary data forwarded untouched to every call of `func`.
        max_iter (int or None): The maximum number of iterations. Defaults to
            `DEFAULT_MAX_ITER` when `None`.
        max_value (optional): An upper bound on the iterates. Mostly useful to
            stop early on monotonically increasing functions. Either a single
            value or a pytree matching the structure of the iterates.
        convergence_test (callable, optional): A two argument function of type
            `(a, a) -> bool` taking the newest and the previous value and
            returning `True` when they should be considered equal. Defaults to
            exact equality, see `fixedpoint.converge.values_equal`.
        observer (fixedpoint.Observer, optional): Notified of every iteration
            and of failures.

    Returns:
        The fixed point found.

    Raises:
        InvalidConfiguration: If `max_iter` is not a positive integer or
            `max_value` does not match the structure of `x0`.
        IterationLimitExceeded: If no fixed point was found after `max_iter`
            iterations.
        ValueLimitExceeded: If an iterate is greater than `max_value`.
    """
    max_iter = _check_max_iter(max_iter)
    if max_value is not None:
        converge.check_limit(x0, max_value)
    if convergence_test is None:
        convergence_test = converge.values_equal

    remaining = max_iter
    x = x0
    value = func(x0, args)

    while not convergence_test(value, x):
        x = value
        value = func(x, args)
        remaining -= 1

        if observer is not None:
            observer.on_iteration(max_iter - remaining, x, value)

        if remaining == 0:
            error = errors.IterationLimitExceeded(max_iter, last_value=value)
        elif max_value is not None and converge.exceeds(value, max_value):
            error = errors.ValueLimitExceeded(max_value, last_value=value)
        else:
            continue

        logger.debug("%s. Last value: %r", error, value)
        if observer is not None:
            observer.on_failure(error)
        raise error

    return value
