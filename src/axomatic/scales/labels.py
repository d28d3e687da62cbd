import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Sequence, Tuple, Union

import numpy as np
from loguru import logger

from axomatic.errors import InvalidArgumentError
from axomatic.scales.decimation import decimate

# Generated labels are rounded to this many decimal places
LABEL_DECIMALS = 2

# First signed decimal number in a label, e.g. "ln 2.30" -> "2.30"
_NUMBER_PATTERN = re.compile(r"-?(?:\d+\.?\d*|\.\d+)")


class LabelTransform(str, Enum):
    """Transformation applied to tick label text after it is generated."""

    NONE = "none"
    LOGNATURAL = "lognatural"


@dataclass(frozen=True)
class Count:
    """Label every `n`-th break. Zero means ticks without text."""

    n: int


@dataclass(frozen=True)
class Explicit:
    """Caller-supplied labels, one per break."""

    labels: Tuple[str, ...]


LabelDensity = Union[Count, Explicit]


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, np.integer, np.floating)) and not isinstance(
        value, (bool, np.bool_)
    )


def format_label(value: float, decimals: int = LABEL_DECIMALS) -> str:
    """
    Format a numeric break as tick label text.

    Rounds to `decimals` places and drops trailing zeros, so 5.0 -> "5",
    2.5 -> "2.5" and 0.30000000000000004 -> "0.3".
    """
    # + 0.0 turns -0.0 into 0.0
    rounded = round(float(value), decimals) + 0.0
    return np.format_float_positional(rounded, trim="-")


def _as_label(value: Any) -> str:
    if _is_number(value):
        return np.format_float_positional(float(value), trim="-")
    return str(value)


def resolve_label_density(value: Any) -> LabelDensity:
    """
    Turn the user-facing `label_density` argument into a LabelDensity.

    Parameters
    ----------
    value : int, float, str, Sequence, Count or Explicit
        A number is a label count (0 = no label text, N = every N-th break).
        A string is a single explicit label. Any other iterable is a
        sequence of explicit labels.

    Returns
    -------
    LabelDensity
        Count or Explicit.

    Raises
    ------
    InvalidArgumentError
        If a number is not integral or the value is not iterable.
    """
    if isinstance(value, (Count, Explicit)):
        return value
    if isinstance(value, str):
        return Explicit((value,))
    if _is_number(value):
        if not float(value).is_integer():
            raise InvalidArgumentError(
                f"Label density must be an integer count or a sequence of labels, got {value!r}"
            )
        return Count(int(value))
    try:
        labels = tuple(_as_label(item) for item in value)
    except TypeError as e:
        raise InvalidArgumentError(
            f"Label density must be an integer count or a sequence of labels, got {value!r}"
        ) from e
    return Explicit(labels)


def tick_labels(breaks: Sequence[float], density: LabelDensity) -> List[str]:
    """
    Build the label text for each break.

    Parameters
    ----------
    breaks : Sequence[float]
        Break positions on the axis.
    density : LabelDensity
        Count(0) gives blank labels, Count(N) labels every N-th break starting
        with the first, Explicit labels are returned as given.

    Returns
    -------
    List[str]
        Labels, one per break for Count densities.
    """
    if isinstance(density, Explicit):
        if len(density.labels) != len(breaks):
            logger.warning(
                f"Number of explicit labels ({len(density.labels)}) doesn't match number of breaks ({len(breaks)})."
            )
        return list(density.labels)

    if density.n == 0:
        return [""] * len(breaks)

    return decimate([format_label(b) for b in breaks], density.n)


def _lognatural(label: str) -> str:
    match = _NUMBER_PATTERN.search(label)
    if match is None:
        return ""
    with np.errstate(over="ignore"):
        value = np.exp(float(match.group()))
    return format_label(value)


def transform_labels(
    labels: Sequence[str], transform: Union[LabelTransform, str] = LabelTransform.NONE
) -> List[str]:
    """
    Apply a LabelTransform to tick label text.

    "lognatural" reads the first number in each label as a natural log,
    exponentiates it and rounds to two decimals ("2.302585" -> "10").
    Labels without a number, including blank ones, become "".

    Raises
    ------
    InvalidArgumentError
        If the transform name is unknown.
    """
    try:
        transform = LabelTransform(transform)
    except ValueError as e:
        raise InvalidArgumentError(
            f"Unknown label transform {transform!r}, expected one of "
            f"{[t.value for t in LabelTransform]}"
        ) from e

    if transform is LabelTransform.NONE:
        return list(labels)
    return [_lognatural(label) for label in labels]
