"""The :mod:`visualization` plots the lattice of a decoding."""

# Authors: Peter Steiner <peter.steiner@tu-dresden.de>
# License: BSD 3 clause

from typing import Optional

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.patches import Rectangle
import seaborn as sns

from ..hmm import DecodeResult


def plot_lattice(result: DecodeResult, *, ax: Optional[Axes] = None,
                 cmap: str = "viridis", annot: bool = True,
                 mark_path: bool = True, colorbar: bool = True) -> Axes:
    """
    Plot the score lattice of a decoding as heat map.

    Columns are time steps, rows are labels. Unreachable cells (-inf) stay
    blank.

    Parameters
    ----------
    result : DecodeResult
        A non-empty decoding.
    ax : Optional[Axes], default = None
        Axes to draw into. A new figure is created if None.
    cmap : str, default = "viridis"
    annot : bool, default = True
        Write the log-probability into each cell.
    mark_path : bool, default = True
        Frame the cells of the best path.
    colorbar : bool, default = True

    Returns
    -------
    ax : Axes
    """
    if len(result) == 0:
        raise ValueError("Cannot plot the lattice of an empty decoding.")
    if ax is None:
        _, ax = plt.subplots()
    sns.heatmap(
        result.scores.T, ax=ax, cmap=cmap, annot=annot, fmt=".2f",
        cbar=colorbar,
        xticklabels=["{0}: {1}".format(t, observation)
                     for t, observation in enumerate(result.observations)],
        yticklabels=[str(label) for label in result.labels])
    if mark_path:
        for t, k in enumerate(result.path_indices):
            if k >= 0:
                ax.add_patch(Rectangle((t, k), 1, 1, fill=False,
                                       edgecolor="red", linewidth=2))
    ax.set_xlabel("t")
    ax.set_ylabel("label")
    return ax
