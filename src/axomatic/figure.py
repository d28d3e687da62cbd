import sys
from typing import Any, Iterable, Optional, Tuple

import matplotlib as mpl
import matplotlib.pyplot as plt
from loguru import logger

from axomatic.scales.directives import apply_directives

DEFAULT_FIGSIZE = (6, 6)


def configure_logging(log_level: str = "INFO") -> None:
    """
    Configure loguru logging with specified level.

    Parameters
    ----------
    log_level : str, default="INFO"
        Logging level: DEBUG, INFO, SUCCESS, WARNING, ERROR, CRITICAL.
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level=log_level.upper(),
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
        colorize=True,
    )


def create_axes(
    directives: Iterable[Any] = (),
    figsize: Tuple[float, float] = DEFAULT_FIGSIZE,
) -> Tuple[mpl.figure.Figure, mpl.axes.Axes]:
    """
    Create a figure with a single axes and apply directives to it.

    Parameters
    ----------
    directives : Iterable, default=()
        Directives from `axomatic()`, `axis_x()` or `axis_y()`.
    figsize : Tuple[float, float], default=(6, 6)
        Figure size in inches.

    Returns
    -------
    Tuple[Figure, Axes]
        The new figure and axes.
    """
    fig, ax = plt.subplots(figsize=figsize)
    apply_directives(ax, directives)
    return fig, ax


def save_figure(fig: Optional[mpl.figure.Figure], filepath: str) -> None:
    """
    Save a figure to a file.

    Parameters
    ----------
    fig : Figure
        Figure to save.
    filepath : str
        Path to save the plot image.
    """
    if fig is None:
        raise RuntimeError("Figure has not been created yet.")
    fig.savefig(filepath)
    logger.info(f"Plot saved to {filepath}")
