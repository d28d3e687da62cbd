from warnings import warn

import matplotlib as mpl
import numpy as np
from loguru import logger

from axomatic import (
    apply_directives,
    axis_x,
    axis_y,
    axomatic,
    configure_logging,
    create_axes,
    save_figure,
)

# --- User configuration dictionary ---
CONFIG = {
    "LOG_LEVEL": "INFO",  # logging level: DEBUG, INFO, SUCCESS, WARNING, ERROR, CRITICAL
    "OUTPUT": "axes_demo.png",
    "FIGSIZE": (6, 6),
    "RATIO": 1,  # y/x ratio of the plot
    "SCALE_SIZE": True,  # True: ratio of plot size, False: ratio of data units
    # ---
    "X_AXIS": {
        "start": 0,
        "end": 20,
        "tick_step": 1,
        "label_density": 5,  # label every 5th tick mark
        "pad": 2,
    },
    "Y_AXIS": {
        "start": 0,
        "end": 100,
        "tick_step": 10,
        "label_density": 2,  # label every other tick mark
        "lower_pad": 0,
        "upper_pad": 5,
    },
}


def main() -> None:
    """
    Plot a parabola on axes built from CONFIG.
    """
    configure_logging(CONFIG.get("LOG_LEVEL", "INFO"))

    x = np.linspace(0, 20, 41)
    y = x**2 / 4

    fig, ax = create_axes(figsize=CONFIG.get("FIGSIZE", (6, 6)))
    ax.plot(x, y, marker="o")
    ax.set_xlabel("x")
    ax.set_ylabel("x² / 4")

    directives = axomatic(
        axis_x(**CONFIG["X_AXIS"]),
        axis_y(**CONFIG["Y_AXIS"]),
        ratio=CONFIG.get("RATIO", 1),
        scale_size=CONFIG.get("SCALE_SIZE", True),
    )
    # Apply after plotting so autoscaling does not override the limits
    apply_directives(ax, directives)
    logger.success(f"Applied {len(directives)} directives")

    save_figure(fig, CONFIG["OUTPUT"])


if __name__ == "__main__":
    # Set Matplotlib rcParams directly here
    for optn, val in {
        "backend": "Agg",
        "figure.constrained_layout.use": True,
        "figure.dpi": 90,
        "font.family": ("sans-serif",),
        "font.size": 11,
        "xtick.labelsize": 10,
        "xtick.major.size": 3,
        "xtick.direction": "in",
        "ytick.labelsize": 10,
        "ytick.direction": "in",
        "ytick.major.size": 3,
        "axes.linewidth": 1.4,
        "axes.labelsize": 11,
    }.items():
        if isinstance(val, (list, tuple)):
            val = tuple(val)
        try:
            mpl.rcParams[optn] = val
        except KeyError:
            warn(f"mpl rcparams key '{optn}' not recognised as a valid rc parameter.")
    main()
