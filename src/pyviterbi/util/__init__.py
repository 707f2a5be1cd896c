"""The :mod:`pyviterbi.util` has utilities for running and analyzing."""

# Authors: Peter Steiner <peter.steiner@tu-dresden.de>
# License: BSD 3 clause

from ._util import new_logger, argument_parser

__all__ = ('new_logger', 'argument_parser')
