from typing import List, Optional, Union

from loguru import logger

from axomatic.errors import InvalidArgumentError, MissingArgumentError
from axomatic.scales.directives import Direction, FixedAspectDirective, ScaleDirective

DEFAULT_RATIO = 1.0


def _check_axis(axis: Optional[ScaleDirective], expected: Direction) -> None:
    name = expected.value.upper()
    if axis is None:
        raise MissingArgumentError(f"{name} axis is not specified")
    if not isinstance(axis, ScaleDirective):
        raise InvalidArgumentError(
            f"{name} axis must be a ScaleDirective from axis_{expected.value}(), got {axis!r}"
        )
    if axis.direction is not expected:
        logger.warning(
            f"{name} axis slot was given a {axis.direction.value} scale. Check the argument order."
        )


def axomatic(
    x: Optional[ScaleDirective] = None,
    y: Optional[ScaleDirective] = None,
    ratio: float = DEFAULT_RATIO,
    scale_size: bool = True,
) -> List[Union[ScaleDirective, FixedAspectDirective]]:
    """
    Combine an x axis, a y axis and the plot shape.

    Parameters
    ----------
    x : ScaleDirective
        X axis made with `axis_x()`.
    y : ScaleDirective
        Y axis made with `axis_y()`.
    ratio : float, default=1
        Ratio between the y and x axis. 1 is a square.
    scale_size : bool, default=True
        If True the ratio is for the physical plot size, so ratio=1 always
        gives a square plot. If False the ratio is between data units, so
        ratio=1 gives equal scale on both axes.

    Returns
    -------
    List[Union[ScaleDirective, FixedAspectDirective]]
        [y, x, aspect], ready for `apply_directives()`.

    Raises
    ------
    MissingArgumentError
        If x or y is not given.
    InvalidArgumentError
        If an axis is not a ScaleDirective, or the y axis has zero span when
        scaling by physical size.

    Examples
    --------
    >>> axomatic(axis_x(0, 20, 5, 1), axis_y(1000, 10000, 100, 2))
    """
    _check_axis(x, Direction.X)
    _check_axis(y, Direction.Y)

    if scale_size:
        if y.span == 0:
            raise InvalidArgumentError(
                f"Y axis limits {y.limits} have zero span, cannot scale the plot size"
            )
        effective_ratio = ratio * x.span / y.span
    else:
        effective_ratio = ratio

    logger.debug(
        f"Aspect ratio {effective_ratio:.6g} (ratio={ratio}, scale_size={scale_size})"
    )
    return [y, x, FixedAspectDirective(float(effective_ratio))]


def compose(
    x_axis: Optional[ScaleDirective] = None,
    y_axis: Optional[ScaleDirective] = None,
    ratio: float = DEFAULT_RATIO,
    scale_is_physical: bool = True,
) -> List[Union[ScaleDirective, FixedAspectDirective]]:
    """Same as `axomatic`, with `scale_is_physical` in place of `scale_size`."""
    return axomatic(x_axis, y_axis, ratio=ratio, scale_size=scale_is_physical)
