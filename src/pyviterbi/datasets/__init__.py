"""The :mod:`pyviterbi.datasets` includes models for reference experiments."""

# Authors: Peter Steiner <peter.steiner@tu-dresden.de>
# License: BSD 3 clause

from ._base import load_part_of_speech


__all__ = ('load_part_of_speech', )
