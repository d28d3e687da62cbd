from enum import Enum
from typing import Any, Iterable, List, Union

import numpy as np
from loguru import logger
from numba import njit

from axomatic.errors import InvalidArgumentError


class DecimationMode(str, Enum):
    """
    What happens to the positions a decimation does not keep.

    BLANK replaces them with a blank value and preserves the length.
    DROP removes them, so the result is shorter than the input.
    """

    BLANK = "blank"
    DROP = "drop"


@njit
def _every_nth_mask_numba(n: int, stride: int, keep_first: bool) -> np.ndarray:
    """
    Numba-optimized keep mask for every-nth selection.

    Parameters
    ----------
    n : int
        Length of the sequence being decimated.
    stride : int
        Distance between selected positions.
    keep_first : bool
        If True, positions 0, stride, 2*stride, ... are kept.
        If False, those positions are the ones removed.

    Returns
    -------
    np.ndarray
        Boolean array of length n, True where the value is kept.
    """
    mask = np.zeros(n, dtype=np.bool_)

    for i in range(n):
        selected = i % stride == 0
        if keep_first:
            mask[i] = selected
        else:
            mask[i] = not selected

    return mask


def _validate_stride(stride: Union[int, float]) -> int:
    """Return stride as an int, rejecting zero, negative and fractional values."""
    if isinstance(stride, (bool, np.bool_)) or not isinstance(
        stride, (int, float, np.integer, np.floating)
    ):
        raise InvalidArgumentError(
            f"Decimation stride must be a positive integer, got {stride!r}"
        )
    if not float(stride).is_integer() or stride <= 0:
        raise InvalidArgumentError(
            f"Decimation stride must be a positive integer, got {stride!r}"
        )
    return int(stride)


def decimate(
    values: Iterable[Any],
    stride: Union[int, float],
    blank_value: Any = "",
    keep_first: bool = True,
    mode: Union[DecimationMode, str] = DecimationMode.BLANK,
) -> List[Any]:
    """
    Keep every `stride`-th value of a sequence and blank or drop the rest.

    With the defaults this is what labels "every Nth tick": the values at
    1-based positions 1, N+1, 2N+1, ... survive and everything else becomes
    an empty string.

    Parameters
    ----------
    values : Iterable[Any]
        Values to decimate. Numbers, strings or any other objects.
    stride : int
        Distance between kept values. Must be a positive integer.
    blank_value : Any, default=""
        Replacement for removed values in BLANK mode.
    keep_first : bool, default=True
        If True, the every-nth positions (starting with the first) are kept.
        If False, they are the ones removed and all others are kept.
    mode : DecimationMode or str, default=DecimationMode.BLANK
        BLANK preserves the length, DROP removes the unkept values.

    Returns
    -------
    List[Any]
        The decimated values.

    Raises
    ------
    InvalidArgumentError
        If stride is not a positive integer or mode is unknown.
    """
    stride = _validate_stride(stride)
    try:
        mode = DecimationMode(mode)
    except ValueError as e:
        raise InvalidArgumentError(
            f"Unknown decimation mode {mode!r}, expected one of "
            f"{[m.value for m in DecimationMode]}"
        ) from e

    items = list(values)
    if not items:
        return []

    keep = _every_nth_mask_numba(len(items), stride, keep_first)
    logger.debug(
        f"Decimating {len(items)} values with stride={stride}, keep_first={keep_first}, mode={mode.value}: keeping {int(np.sum(keep))}"
    )

    if mode is DecimationMode.DROP:
        return [value for value, kept in zip(items, keep) if kept]
    return [value if kept else blank_value for value, kept in zip(items, keep)]
