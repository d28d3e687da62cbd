from typing import Any, Optional, Union

import numpy as np
from loguru import logger

from axomatic.errors import InvalidArgumentError
from axomatic.scales.directives import Direction, ScaleDirective
from axomatic.scales.labels import (
    LabelTransform,
    resolve_label_density,
    tick_labels,
    transform_labels,
)

# Axis defaults
DEFAULT_TICK_STEP = 1
DEFAULT_LABEL_DENSITY = 1
DEFAULT_PAD = 0.0

# Tolerance when counting steps, so 0.3 / 0.1 still gives 3 steps
STEP_COUNT_FUZZ = 1e-10


def stepped_breaks(start: float, end: float, step: float) -> np.ndarray:
    """
    Break positions from `start` towards `end` in increments of `step`.

    `end` is included only when the step lands on it; otherwise the last
    break falls short of `end`. A step pointing away from `end` gives no
    breaks, `start == end` gives a single break and `step == 0` gives none.

    Parameters
    ----------
    start : float
        First break.
    end : float
        Bound the breaks do not pass.
    step : float
        Distance between breaks.

    Returns
    -------
    np.ndarray
        Break positions as float64.

    Raises
    ------
    InvalidArgumentError
        If start, end or step is NaN or infinite.
    """
    if not np.all(np.isfinite([start, end, step])):
        raise InvalidArgumentError(
            f"Axis start, end and step must be finite, got start={start}, end={end}, step={step}"
        )
    if step == 0:
        return np.array([], dtype=np.float64)

    n_steps = int(np.floor((end - start) / step + STEP_COUNT_FUZZ))
    if n_steps < 0:
        logger.debug(
            f"Step {step} points away from end ({start} -> {end}), no breaks generated"
        )
        return np.array([], dtype=np.float64)

    breaks = start + np.arange(n_steps + 1, dtype=np.float64) * step
    # Clamp accumulated float error past the end
    if step > 0:
        return np.minimum(breaks, end)
    return np.maximum(breaks, end)


def _resolve_pad(side_pad: Optional[float], pad: float) -> float:
    """Padding for one side: explicit value if given, otherwise `pad`."""
    if side_pad is None or (isinstance(side_pad, float) and np.isnan(side_pad)):
        return float(pad)
    return float(side_pad)


def build_axis(
    direction: Union[Direction, str],
    start: float,
    end: float,
    tick_step: float = DEFAULT_TICK_STEP,
    label_density: Any = DEFAULT_LABEL_DENSITY,
    pad: float = DEFAULT_PAD,
    lower_pad: Optional[float] = None,
    upper_pad: Optional[float] = None,
    label_transform: Union[LabelTransform, str] = LabelTransform.NONE,
) -> ScaleDirective:
    """
    Build a scale directive for one axis.

    Parameters
    ----------
    direction : Direction or str
        "x" or "y".
    start : float
        Start of the axis, and the first tick mark.
    end : float
        End of the axis. The last tick mark is at or before it.
    tick_step : float, default=1
        Space between tick marks. 0 removes all tick marks and labels.
    label_density : int or Sequence[str], default=1
        0 = tick marks without labels, 1 = label every tick mark, 5 = label
        every 5th tick mark, and so on. A sequence gives the labels directly,
        one per tick mark.
    pad : float, default=0
        Space before the first and after the last tick mark.
    lower_pad : Optional[float], default=None
        Space before the first tick mark. Overrides `pad` when given.
    upper_pad : Optional[float], default=None
        Space after the last tick mark. Overrides `pad` when given.
    label_transform : LabelTransform or str, default="none"
        "lognatural" turns labels of log-transformed data back into the
        original values.

    Returns
    -------
    ScaleDirective
        Breaks, labels and limits for the axis.

    Raises
    ------
    InvalidArgumentError
        For an unknown direction or transform, a fractional or negative label
        count, or a non-finite start, end or step. Label arguments are not
        checked when tick_step is 0.
    """
    direction = Direction.parse(direction)

    lower_lim = start - _resolve_pad(lower_pad, pad)
    upper_lim = end + _resolve_pad(upper_pad, pad)

    if tick_step == 0:
        # No tick marks: the label arguments are not used
        logger.debug(
            f"Built {direction.value} axis without ticks, limits=({lower_lim}, {upper_lim})"
        )
        return ScaleDirective(
            direction=direction,
            breaks=(),
            labels=(),
            limits=(float(lower_lim), float(upper_lim)),
        )

    density = resolve_label_density(label_density)
    breaks = stepped_breaks(start, end, tick_step)
    labels = transform_labels(tick_labels(breaks, density), label_transform)

    logger.debug(
        f"Built {direction.value} axis: breaks={breaks.tolist()}, labels={labels}, limits=({lower_lim}, {upper_lim})"
    )

    return ScaleDirective(
        direction=direction,
        breaks=tuple(float(b) for b in breaks),
        labels=tuple(labels),
        limits=(float(lower_lim), float(upper_lim)),
    )


def axis_x(
    start: float,
    end: float,
    tick_step: float = DEFAULT_TICK_STEP,
    label_density: Any = DEFAULT_LABEL_DENSITY,
    pad: float = DEFAULT_PAD,
    lower_pad: Optional[float] = None,
    upper_pad: Optional[float] = None,
    label_transform: Union[LabelTransform, str] = LabelTransform.NONE,
) -> ScaleDirective:
    """
    Define the x axis: tick marks, labels and padding.

    `axis_x(0, 20, tick_step=1, label_density=5, pad=2)` makes an axis from
    0 to 20 with a tick mark at every integer, a label on every 5th tick mark
    and a space of 2 before and after the marks. See `build_axis` for the
    parameters.
    """
    return build_axis(
        Direction.X,
        start,
        end,
        tick_step,
        label_density,
        pad,
        lower_pad,
        upper_pad,
        label_transform,
    )


def axis_y(
    start: float,
    end: float,
    tick_step: float = DEFAULT_TICK_STEP,
    label_density: Any = DEFAULT_LABEL_DENSITY,
    pad: float = DEFAULT_PAD,
    lower_pad: Optional[float] = None,
    upper_pad: Optional[float] = None,
    label_transform: Union[LabelTransform, str] = LabelTransform.NONE,
) -> ScaleDirective:
    """Define the y axis. Same parameters as `axis_x`."""
    return build_axis(
        Direction.Y,
        start,
        end,
        tick_step,
        label_density,
        pad,
        lower_pad,
        upper_pad,
        label_transform,
    )
