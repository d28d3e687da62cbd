from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Tuple

from loguru import logger

from axomatic.errors import InvalidArgumentError


class Direction(str, Enum):
    """Axis a scale directive applies to."""

    X = "x"
    Y = "y"

    @classmethod
    def parse(cls, value: Any) -> "Direction":
        try:
            return cls(value.lower() if isinstance(value, str) else value)
        except ValueError as e:
            raise InvalidArgumentError(
                f"Axis direction must be 'x' or 'y', got {value!r}"
            ) from e


@dataclass(frozen=True)
class ScaleDirective:
    """
    Continuous scale settings for one axis.

    Holds fixed tick positions, their label text and the display limits.
    Applying it to matplotlib Axes sets the ticks, labels and limits of the
    matching axis and nothing else.
    """

    direction: Direction
    breaks: Tuple[float, ...]
    labels: Tuple[str, ...]
    limits: Tuple[float, float]

    @property
    def lower(self) -> float:
        return self.limits[0]

    @property
    def upper(self) -> float:
        return self.limits[1]

    @property
    def span(self) -> float:
        """Width of the display window, padding included."""
        return self.limits[1] - self.limits[0]

    def apply(self, ax) -> None:
        """Set ticks, tick labels and limits on `ax`."""
        logger.debug(
            f"Setting {self.direction.value} scale: {len(self.breaks)} breaks, limits={self.limits}"
        )
        if self.direction is Direction.X:
            ax.set_xticks(list(self.breaks), labels=list(self.labels))
            ax.set_xlim(self.limits)
        else:
            ax.set_yticks(list(self.breaks), labels=list(self.labels))
            ax.set_ylim(self.limits)


@dataclass(frozen=True)
class FixedAspectDirective:
    """
    Fixed ratio between y and x data units.

    A ratio of 1 makes one unit on the y axis as long as one unit on the x
    axis. The axes box is resized, the limits are kept.
    """

    ratio: float

    def apply(self, ax) -> None:
        logger.debug(f"Setting fixed aspect ratio {self.ratio:.6g}")
        ax.set_aspect(self.ratio, adjustable="box")


def apply_directives(ax, directives: Iterable[Any]):
    """
    Apply directives to matplotlib Axes in order.

    Parameters
    ----------
    ax : matplotlib.axes.Axes
        Axes to configure.
    directives : Iterable
        Objects with an `apply(ax)` method, e.g. the list returned by
        `axomatic()` or a single `axis_x()` result wrapped in a list.

    Returns
    -------
    matplotlib.axes.Axes
        The same axes, for chaining.

    Raises
    ------
    InvalidArgumentError
        If an item has no `apply` method.
    """
    for directive in directives:
        apply = getattr(directive, "apply", None)
        if not callable(apply):
            raise InvalidArgumentError(
                f"Expected a plot directive with an apply(ax) method, got {directive!r}"
            )
        apply(ax)
    return ax
