"""The :mod:`pyviterbi` module includes Viterbi decoding for discrete HMMs."""

# Authors: Peter Steiner <peter.steiner@tu-dresden.de>
# License: BSD 3 clause

from ._version import __version__

from . import datasets, exceptions, hmm, inspection, util


__all__ = ('__version__',
           'datasets',
           'exceptions',
           'hmm',
           'inspection',
           'util')
