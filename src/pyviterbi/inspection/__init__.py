"""The :mod:`pyviterbi.inspection` includes tools to inspect decodings."""

# Authors: Peter Steiner <peter.steiner@tu-dresden.de>
# License: BSD 3 clause

from ._visualization import plot_lattice


__all__ = ('plot_lattice', )
