"""
Axomatic: axis helpers for matplotlib

Define tick marks, labels, padding and plot shape with a few friendly
parameters and apply them to matplotlib axes.
"""

from axomatic.errors import AxomaticError, InvalidArgumentError, MissingArgumentError
from axomatic.figure import configure_logging, create_axes, save_figure

# Import from scales subpackage
from axomatic.scales import (
    Count,
    DecimationMode,
    Direction,
    Explicit,
    FixedAspectDirective,
    LabelTransform,
    ScaleDirective,
    apply_directives,
    axis_x,
    axis_y,
    axomatic,
    build_axis,
    compose,
    decimate,
)

__all__ = [
    # Axis helpers
    "axomatic",
    "compose",
    "axis_x",
    "axis_y",
    "build_axis",
    "decimate",
    "DecimationMode",
    "Direction",
    "Count",
    "Explicit",
    "LabelTransform",
    # Directives and figures
    "ScaleDirective",
    "FixedAspectDirective",
    "apply_directives",
    "create_axes",
    "save_figure",
    "configure_logging",
    # Errors
    "AxomaticError",
    "MissingArgumentError",
    "InvalidArgumentError",
]
