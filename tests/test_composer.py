"""Tests for combining axes and the plot shape."""

import pytest

from axomatic import (
    FixedAspectDirective,
    InvalidArgumentError,
    MissingArgumentError,
    axis_x,
    axis_y,
    axomatic,
    compose,
)


class TestAxomatic:
    def test_order(self, x_axis, y_axis):
        result = axomatic(x_axis, y_axis)
        assert len(result) == 3
        assert result[0] is y_axis
        assert result[1] is x_axis
        assert isinstance(result[2], FixedAspectDirective)

    def test_physical_ratio_makes_square(self):
        x = axis_x(0, 20)
        y = axis_y(0, 100, 10)
        aspect = axomatic(x, y, ratio=1, scale_size=True)[2]
        assert aspect.ratio == pytest.approx(0.2)

    def test_physical_ratio_includes_padding(self, x_axis, y_axis):
        # x limits (-2, 22), y limits (0, 100)
        aspect = axomatic(x_axis, y_axis)[2]
        assert aspect.ratio == pytest.approx(24 / 100)

    def test_physical_ratio_scales(self):
        x = axis_x(0, 20)
        y = axis_y(0, 100, 10)
        aspect = axomatic(x, y, ratio=0.5)[2]
        assert aspect.ratio == pytest.approx(0.1)

    def test_data_ratio(self):
        x = axis_x(0, 20)
        y = axis_y(0, 100, 10)
        assert axomatic(x, y, ratio=1, scale_size=False)[2].ratio == 1

    def test_data_ratio_independent_of_span(self):
        x = axis_x(0, 3)
        y = axis_y(0, 1000, 100)
        assert axomatic(x, y, ratio=2.5, scale_size=False)[2].ratio == 2.5

    def test_compose_matches_axomatic(self, x_axis, y_axis):
        assert compose(x_axis, y_axis) == axomatic(x_axis, y_axis)

    def test_compose_scale_is_physical(self):
        x = axis_x(0, 20)
        y = axis_y(0, 100, 10)
        assert compose(x, y, ratio=1, scale_is_physical=True)[2].ratio == pytest.approx(0.2)
        assert compose(x, y, ratio=1, scale_is_physical=False)[2].ratio == 1

    def test_compose_keyword_axes(self, x_axis, y_axis):
        result = compose(x_axis=x_axis, y_axis=y_axis)
        assert result[0] is y_axis
        assert result[1] is x_axis

    def test_compose_missing_axis(self, x_axis):
        with pytest.raises(MissingArgumentError):
            compose(x_axis)

    def test_axomatic_scale_size_keyword(self):
        x = axis_x(0, 20)
        y = axis_y(0, 100, 10)
        assert axomatic(x, y, scale_size=False)[2].ratio == 1


class TestAxomaticErrors:
    def test_missing_x(self, y_axis):
        with pytest.raises(MissingArgumentError, match="X axis is not specified"):
            axomatic(y=y_axis)

    def test_missing_y(self, x_axis):
        with pytest.raises(MissingArgumentError, match="Y axis is not specified"):
            axomatic(x_axis)

    def test_missing_is_type_error(self):
        with pytest.raises(TypeError):
            axomatic()

    def test_not_a_scale(self, y_axis):
        with pytest.raises(InvalidArgumentError):
            axomatic((0, 20), y_axis)

    def test_zero_y_span(self, x_axis):
        y = axis_y(5, 5)
        with pytest.raises(InvalidArgumentError):
            axomatic(x_axis, y)

    def test_zero_y_span_allowed_for_data_ratio(self, x_axis):
        y = axis_y(5, 5)
        assert axomatic(x_axis, y, scale_size=False)[2].ratio == 1

    def test_swapped_axes_accepted(self, x_axis, y_axis):
        result = axomatic(y_axis, x_axis)
        assert result[0] is x_axis
        assert result[2].ratio == pytest.approx(100 / 24)
