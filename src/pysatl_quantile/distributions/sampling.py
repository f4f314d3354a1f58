"""
Sampling Interfaces
===================

This module defines the sample container returned by the distributions
and the inverse transform sampler that fills it.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from typing import Any

    import numpy.typing as npt


class Sample(Protocol):
    """
    Protocol for sample containers.

    Attributes
    ----------
    array : numpy.ndarray
        Array representation of the samples.
    shape : tuple[int, ...]
        Shape of the sample array.
    """

    def __len__(self) -> int: ...
    @property
    def array(self) -> npt.NDArray[np.floating[Any]]: ...
    @property
    def shape(self) -> tuple[int, ...]: ...


class ArraySample:
    """
    Array-backed sample container of shape ``(n_samples, n_dimensions)``.

    Parameters
    ----------
    data : numpy.ndarray
        2D array of shape ``(n, d)``.

    Raises
    ------
    ValueError
        If data is not 2D.
    """

    dimension: int
    data: npt.NDArray[np.floating[Any]]

    def __init__(self, data: npt.NDArray[np.floating[Any]]) -> None:
        if data.ndim != 2:
            raise ValueError("ArraySample expects 2D array of shape (n, d).")
        self.data = data
        self.dimension = int(data.shape[1])

    def __len__(self) -> int:
        """Return the number of samples (n)."""
        return int(self.data.shape[0])

    def __iter__(self) -> Iterator[npt.NDArray[np.floating[Any]]]:
        """Iterate over samples (rows of the array)."""
        yield from self.data

    @property
    def array(self) -> npt.NDArray[np.floating[Any]]:
        """Return the backing array."""
        return self.data

    @property
    def shape(self) -> tuple[int, ...]:
        """Return the shape of the sample array (n, d)."""
        n, d = self.data.shape
        return int(n), int(d)

    def ravel(self) -> npt.NDArray[np.floating[Any]]:
        """Return the samples of a univariate container as a flat array."""
        return self.data.reshape(-1)


class InverseTransformSampler:
    """
    Univariate sampler applying an inverse CDF to uniform variates.

    Parameters
    ----------
    inverse_cdf : Callable[[float], float]
        Inverse cumulative probability of the target distribution.
    rng : numpy.random.Generator, optional
        Source of uniforms; a fresh ``default_rng()`` when omitted.
    dtype : numpy dtype, default ``numpy.float64``
        dtype of the returned samples (``numpy.int64`` for discrete
        distributions).
    """

    def __init__(
        self,
        inverse_cdf: Callable[[float], Any],
        rng: np.random.Generator | None = None,
        dtype: Any = np.float64,
    ) -> None:
        self.inverse_cdf = inverse_cdf
        self.rng = rng if rng is not None else np.random.default_rng()
        self.dtype = dtype

    def sample_one(self) -> Any:
        """Draw a single value."""
        return self.inverse_cdf(float(self.rng.random()))

    def sample(self, n: int) -> ArraySample:
        """
        Draw ``n`` independent values.

        Returns
        -------
        ArraySample
            A 2D sample of shape ``(n, 1)``.
        """
        if n < 0:
            raise ValueError(f"Sample size must be non-negative, got {n}")
        u = self.rng.random(n)
        values = np.array([self.inverse_cdf(float(ui)) for ui in u], dtype=self.dtype)
        return ArraySample(values.reshape(n, 1))


__all__ = [
    "Sample",
    "ArraySample",
    "InverseTransformSampler",
]
