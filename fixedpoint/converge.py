import numpy as onp
from jax import tree_util

from fixedpoint import errors

_LEAF = tree_util.tree_structure(0)


def _flatten(x):
    try:
        return tree_util.tree_flatten(x)
    except (TypeError, ValueError):
        # Dicts with keys that cannot be sorted are compared as a whole.
        return [x], _LEAF


def _leaf_equal(x, y):
    return bool(onp.array_equal(x, y))


def values_equal(x_new, x_old):
    """Exact equality between two iterates.

    Iterates may be scalars, arbitrary objects defining `__eq__`, numpy/jax
    arrays or pytrees of those. Two pytrees are equal when they share the same
    structure and every pair of leaves is equal. Dicts whose keys cannot be
    sorted are not flattened and are compared with their own `__eq__`.

    Args:
        x_new: The newest iterate.
        x_old: The previous iterate.

    Returns:
        bool: True if the two iterates are identical.
    """
    new_leaves, new_tree = _flatten(x_new)
    old_leaves, old_tree = _flatten(x_old)
    if new_tree != old_tree:
        return False
    return all(map(_leaf_equal, new_leaves, old_leaves))


def _leaf_exceeds(x, limit):
    return bool(onp.any(x > limit))


def _broadcast_limit(x, limit):
    leaves, tree = _flatten(x)
    limit_leaves, limit_tree = _flatten(limit)

    if limit_tree.num_leaves == 1:
        return leaves, limit_leaves * len(leaves)
    if limit_tree != tree:
        raise errors.InvalidConfiguration(
            "`max_value` must be a single value or match the structure of the "
            "iterates, got {} and {}.".format(limit_tree, tree))
    return leaves, limit_leaves


def check_limit(x, limit):
    """Raise `InvalidConfiguration` if `limit` cannot bound iterates like `x`."""
    _broadcast_limit(x, limit)


def exceeds(x, limit):
    """Check if any part of `x` is strictly greater than `limit`.

    Args:
        x: The iterate to check.
        limit: Either a pytree with the same structure as `x` or a single
            value used as the bound for every leaf of `x`. Dicts whose keys
            cannot be sorted are compared as a whole, so their type must
            define `>` itself.

    Returns:
        bool: True if some leaf of `x` exceeds its bound.

    Raises:
        InvalidConfiguration: If the structure of `limit` does not match `x`.
    """
    leaves, limit_leaves = _broadcast_limit(x, limit)
    return any(map(_leaf_exceeds, leaves, limit_leaves))


def adjust_tol_for_dtype(rtol, atol, dtype):
    """Adjust tolerances to the closest achievable values.

    Args:
        rtol (float): The relative tolerance.
        atol (float): The absolute tolerance.
        dtype (type): The floating point data type used.

    Returns:
        A tuple `(rtol, atol)` of tolerances which are achievable when comparing
        floats of type `dtype`. If the given tolerances are large enough then
        they are returned unchanged.
    """
    finfo = onp.finfo(dtype)
    return max(rtol, finfo.resolution), max(atol, finfo.eps)


def is_tolerance_achievable(rtol, atol, dtype):
    adj_rtol, adj_atol = adjust_tol_for_dtype(rtol, atol, dtype)
    return adj_rtol == rtol and adj_atol == atol


def _leaf_close(x_new, x_old, rtol, atol):
    x_new = onp.asarray(x_new)
    x_old = onp.asarray(x_old)
    if onp.issubdtype(x_new.dtype, onp.inexact):
        rtol, atol = adjust_tol_for_dtype(rtol, atol, x_new.dtype)
    delta = onp.max(onp.abs(x_new - x_old))
    scale = onp.max(onp.abs(x_new))
    return bool(delta < rtol * scale + atol)


def max_diff_test(x_new, x_old, rtol, atol):
    """Max-abs-difference convergence test scaled by the newest iterate."""
    new_leaves, new_tree = _flatten(x_new)
    old_leaves, old_tree = _flatten(x_old)
    if new_tree != old_tree:
        return False
    is_close = [_leaf_close(a, b, rtol, atol)
                for a, b in zip(new_leaves, old_leaves)]
    return all(is_close)


def make_tolerance_test(rtol=1e-10, atol=1e-10):
    """Create a tolerance based convergence test.

    Exact equality rarely terminates for floating point iterates. The returned
    callable can be passed as `convergence_test` to
    `fixedpoint.fixed_point` instead.

    Args:
        rtol (float, optional): The relative tolerance.
        atol (float, optional): The absolute tolerance.

    Returns:
        A callable of type `(a, a) -> bool`.
    """
    if rtol < 0 or atol < 0:
        raise ValueError("Tolerances must be non-negative.")

    def convergence_test(x_new, x_old):
        return max_diff_test(x_new, x_old, rtol, atol)
    return convergence_test
