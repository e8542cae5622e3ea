"""
Regularization grid.
"""

import numpy as np


# Exponents (base 10) of the default grid: 0.01 ... 10000
GRID_START = -2.0
GRID_STOP = 4.0
GRID_STEP = 0.2


def make_lambda_grid(
    start: float = GRID_START,
    stop: float = GRID_STOP,
    step: float = GRID_STEP
) -> np.ndarray:
    """
    Log-spaced penalty values 10**e for e = start, start + step, ..., stop.

    With the defaults this gives 31 values from 0.01 to 10000.

    Returns
    -------
    ndarray
        Ascending, read-only
    """
    if not step > 0:
        raise ValueError(f"step must be positive, got {step}")
    if stop < start:
        raise ValueError(f"stop ({stop}) must not be below start ({start})")

    num = int(np.floor((stop - start) / step + 1e-9)) + 1
    exponents = start + step * np.arange(num)
    grid = np.power(10.0, exponents)
    grid.flags.writeable = False
    return grid
