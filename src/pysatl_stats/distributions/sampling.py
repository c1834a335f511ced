"""
Sampling
========

Array-backed sample container and inverse transform sampling through a
scalar ``ppf``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import Any

    import numpy.typing as npt

    from pysatl_stats.types import ScalarFunc

type SeedLike = np.random.Generator | int | None


class ArraySample:
    """
    Array-backed sample container.

    Stores samples as a 2D floating-point array of shape
    ``(n_samples, n_dimensions)``.

    Parameters
    ----------
    data : numpy.ndarray
        2D floating-point array of shape (n, d).

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
        return int(self.data.shape[0])

    def __iter__(self) -> Iterator[npt.NDArray[np.floating[Any]]]:
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


def inverse_transform_sample(ppf: ScalarFunc, n: int, rng: SeedLike = None) -> ArraySample:
    """
    Draw ``n`` univariate samples by applying ``ppf`` to i.i.d. uniforms.

    Parameters
    ----------
    ppf : Callable[[float], float]
        Scalar quantile function.
    n : int
        Number of samples, ``n >= 0``.
    rng : numpy.random.Generator, int or None
        Generator, or seed passed to :func:`numpy.random.default_rng`.

    Returns
    -------
    ArraySample
        Sample of shape ``(n, 1)``.

    Raises
    ------
    ValueError
        If ``n`` is negative.
    """
    if n < 0:
        raise ValueError(f"Sample size must be non-negative, got {n}")
    generator = np.random.default_rng(rng)
    uniforms = generator.random(n)
    values = np.array([ppf(float(u)) for u in uniforms], dtype=np.float64).reshape(n, 1)
    return ArraySample(values)
