"""The :mod:`pyviterbi.hmm` module includes the HMM and Viterbi decoding."""

# Authors: Peter Steiner <peter.steiner@tu-dresden.de>
# License: BSD 3 clause

from ._model import HiddenMarkovModel
from ._validation import check_observations
from ._viterbi_decoder import (EMISSION_FLOOR, DecodeResult, ViterbiDecoder,
                               decode)


__all__ = ('EMISSION_FLOOR',
           'DecodeResult',
           'HiddenMarkovModel',
           'ViterbiDecoder',
           'check_observations',
           'decode')
