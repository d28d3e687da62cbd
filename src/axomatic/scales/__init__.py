"""
Axis helpers for axomatic.

This package turns friendly axis parameters (range, tick spacing, label
density, padding) into directives that configure matplotlib axes.
"""

from axomatic.scales.axis import axis_x, axis_y, build_axis, stepped_breaks
from axomatic.scales.composer import axomatic, compose
from axomatic.scales.decimation import DecimationMode, decimate
from axomatic.scales.directives import (
    Direction,
    FixedAspectDirective,
    ScaleDirective,
    apply_directives,
)
from axomatic.scales.labels import Count, Explicit, LabelTransform

__all__ = [
    "axomatic",
    "compose",
    "axis_x",
    "axis_y",
    "build_axis",
    "stepped_breaks",
    "decimate",
    "DecimationMode",
    "Direction",
    "ScaleDirective",
    "FixedAspectDirective",
    "apply_directives",
    "Count",
    "Explicit",
    "LabelTransform",
]
