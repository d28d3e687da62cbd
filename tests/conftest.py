"""Pytest configuration and fixtures for axomatic tests."""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

from axomatic import axis_x, axis_y


@pytest.fixture
def x_axis():
    """X axis over [0, 20], label every 5th tick, pad 2 -> limits (-2, 22)."""
    return axis_x(0, 20, tick_step=1, label_density=5, pad=2)


@pytest.fixture
def y_axis():
    """Y axis over [0, 100] without padding."""
    return axis_y(0, 100, tick_step=10, label_density=1)


@pytest.fixture
def ax():
    """Fresh matplotlib axes, closed after the test."""
    fig, ax = plt.subplots()
    yield ax
    plt.close(fig)
