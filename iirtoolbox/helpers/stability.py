import numpy as np
from numpy.typing import NDArray


def _get_poles(a: NDArray[np.float64]) -> NDArray[np.complex128]:
    """Compute the poles of a filter from its feedback (denominator)
    coefficients.

    Parameters
    ----------
    a : NDArray[np.float64]
        Feedback coefficients with `a[0] != 0`. Coefficient `a[i]` multiplies
        the output `i` samples in the past.

    Returns
    -------
    NDArray[np.complex128]
        Poles in the z-plane. Trailing zero coefficients reduce the number of
        poles, so the returned array can be shorter than `len(a) - 1`.

    """
    # Trailing zeros would only add poles at the origin
    nonzero = np.nonzero(a)[0]
    last = nonzero[-1] if len(nonzero) > 0 else 0
    return np.roots(a[: last + 1]).astype(np.complex128)


def _is_stable(a: NDArray[np.float64]) -> bool:
    """Check that all poles lie strictly inside the unit circle."""
    poles = _get_poles(a)
    return bool(np.all(np.abs(poles) < 1.0))
