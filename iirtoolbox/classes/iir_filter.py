from warnings import warn

import numpy as np
from numpy.typing import NDArray, ArrayLike
from scipy.signal import lfilter, lfiltic

from .enums import ConfigurationFault
from .exceptions import InvalidConfigurationError
from .realtime_filter import RealtimeFilter
from ..helpers.stability import _is_stable


class IIRFilter(RealtimeFilter):
    """Single-channel IIR filter implemented as a direct form 1. It realizes
    the difference equation

    ```
        y[n] = (sum_{i=0}^{N} b[i] x[n-i] - sum_{i=1}^{N} a[i] y[n-i]) / a[0]
    ```

    where `N` is the order of the filter. The last `N` inputs and outputs are
    stored as circular buffers.

    """

    def __init__(self, order: int):
        """Instantiate an IIR filter with a fixed order. The coefficients are
        initialized with `a = b = [1, 0, ..., 0]`, so that the filter passes
        the input through unchanged until `set_coefficients` is called.

        Parameters
        ----------
        order : int
            Order of the filter, i.e., number of past input and output samples
            that are stored. It must be greater than 0.

        Raises
        ------
        InvalidConfigurationError
            If the order is not a positive integer.

        """
        if (
            isinstance(order, bool)
            or not isinstance(order, (int, np.integer))
            or order <= 0
        ):
            raise InvalidConfigurationError(
                ConfigurationFault.Order,
                f"Order must be an integer greater than zero, got {order!r}",
            )
        self.__order = int(order)

        self.a = np.zeros(self.__order + 1)
        self.a[0] = 1.0
        self.b = self.a.copy()

        self.input_state = np.zeros(self.__order)
        self.output_state = np.zeros(self.__order)
        self.write_index = 0

    @staticmethod
    def from_ba(b: ArrayLike, a: ArrayLike):
        """Instantiate an IIR filter from b (numerator) and a (denominator)
        coefficients. The order is derived from the longest coefficient
        vector and the shorter one is padded with zeros.

        Parameters
        ----------
        b : ArrayLike
            Feedforward (numerator) coefficients.
        a : ArrayLike
            Feedback (denominator) coefficients. `a[0]` cannot be zero.

        Returns
        -------
        IIRFilter

        """
        b = np.atleast_1d(np.asarray(b, dtype=np.float64))
        a = np.atleast_1d(np.asarray(a, dtype=np.float64))
        order = max(len(b), len(a)) - 1
        filt = IIRFilter(order)
        filt.set_coefficients(
            np.pad(a, (0, order + 1 - len(a))),
            np.pad(b, (0, order + 1 - len(b))),
        )
        return filt

    @property
    def order(self) -> int:
        return self.__order

    @property
    def coefficients(self) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
        """Copies of the feedback (a) and feedforward (b) coefficients."""
        return self.a.copy(), self.b.copy()

    @property
    def input_history(self) -> NDArray[np.float64]:
        """Last inputs ordered from newest to oldest, i.e., element `i`
        corresponds to `x[n-1-i]`."""
        return self.input_state[self.__history_indices()]

    @property
    def output_history(self) -> NDArray[np.float64]:
        """Last outputs ordered from newest to oldest, i.e., element `i`
        corresponds to `y[n-1-i]`."""
        return self.output_state[self.__history_indices()]

    @property
    def is_stable(self) -> bool:
        """`True` if all poles lie inside the unit circle."""
        return _is_stable(self.a)

    def set_coefficients(self, a: ArrayLike, b: ArrayLike):
        """Set new filter coefficients. Both vectors are copied and replaced
        only if all checks pass. The stored inputs and outputs are kept.

        Parameters
        ----------
        a : ArrayLike
            Feedback coefficients with length `order + 1`. `a[0]` normalizes
            the difference equation and cannot be zero.
        b : ArrayLike
            Feedforward coefficients with length `order + 1`.

        Raises
        ------
        InvalidConfigurationError
            If any of the lengths does not match or `a[0]` is zero.

        """
        a = np.array(a, dtype=np.float64)
        b = np.array(b, dtype=np.float64)
        expected_shape = (self.__order + 1,)

        if a.shape != expected_shape:
            raise InvalidConfigurationError(
                ConfigurationFault.FeedbackLength,
                f"a coefficients must be of size {self.__order + 1}, got "
                + f"shape {a.shape}",
            )
        if b.shape != expected_shape:
            raise InvalidConfigurationError(
                ConfigurationFault.FeedforwardLength,
                f"b coefficients must be of size {self.__order + 1}, got "
                + f"shape {b.shape}",
            )
        if a[0] == 0.0:
            raise InvalidConfigurationError(
                ConfigurationFault.LeadingFeedbackZero,
                "a[0] must not be zero",
            )

        if np.all(np.isfinite(a)) and not _is_stable(a):
            warn(
                "At least one pole lies on or outside the unit circle. The "
                + "filter output might grow without bounds"
            )

        self.a = a
        self.b = b

    def reset_state(self):
        self.input_state.fill(0.0)
        self.output_state.fill(0.0)
        self.write_index = 0

    def process_sample(self, x: float) -> float:
        """Process a sample."""
        y = self.b[0] * x
        for i in range(self.__order):
            read_index = (self.write_index - i) % self.__order
            y += (
                self.b[i + 1] * self.input_state[read_index]
                - self.a[i + 1] * self.output_state[read_index]
            )
        y /= self.a[0]

        self.write_index = (self.write_index + 1) % self.__order
        self.input_state[self.write_index] = x
        self.output_state[self.write_index] = y
        return float(y)

    def process_block(self, x: ArrayLike) -> NDArray[np.float64]:
        """Filter a block of samples. The result and the stored state are the
        same as if each sample had been passed to `process_sample`.

        Parameters
        ----------
        x : ArrayLike
            Block of input samples with a single dimension.

        Returns
        -------
        NDArray[np.float64]
            Filtered block.

        """
        x = np.asarray(x, dtype=np.float64)
        assert x.ndim == 1, "Only blocks with a single dimension are supported"
        if len(x) == 0:
            return np.zeros(0)

        b = self.b / self.a[0]
        a = self.a / self.a[0]
        zi = lfiltic(b, a, self.output_history, self.input_history)
        y, _ = lfilter(b, a, x, zi=zi)

        indices = self.__history_indices()
        self.input_state[indices] = np.concatenate(
            [x[::-1], self.input_history]
        )[: self.__order]
        self.output_state[indices] = np.concatenate(
            [y[::-1], self.output_history]
        )[: self.__order]
        return y

    def __history_indices(self) -> NDArray[np.int_]:
        """Buffer indices from the newest to the oldest stored sample."""
        return (self.write_index - np.arange(self.__order)) % self.__order
