"""The :mod:`validation` checks observation sequences before decoding."""

# Authors: Peter Steiner <peter.steiner@tu-dresden.de>
# License: BSD 3 clause

from typing import Dict, Hashable, Iterable, List

from ._model import HiddenMarkovModel
from ..exceptions import InvalidInput


def check_observations(model: HiddenMarkovModel,
                       observations: Iterable[Hashable]) -> List[Hashable]:
    """
    Check that an observation sequence only uses the model vocabulary.

    The decoder tolerates unknown symbols. This check is meant for the
    boundary of an application that wants to reject them instead.

    Parameters
    ----------
    model : HiddenMarkovModel
    observations : Iterable[Hashable]

    Returns
    -------
    observations : List[Hashable]
        The validated observation sequence.

    Raises
    ------
    InvalidInput
        If the sequence is a plain string or contains a symbol that is not in
        ``model.symbols``.
    """
    if isinstance(observations, (str, bytes)):
        raise InvalidInput("observations must be a sequence of symbols, got "
                           "the string {0!r}.".format(observations))
    try:
        observations = list(observations)
    except TypeError:
        raise InvalidInput("observations must be iterable, got {0!r}."
                           .format(observations)) from None
    vocabulary = set(model.symbols)
    unknown: Dict[Hashable, List[int]] = {}
    for t, symbol in enumerate(observations):
        try:
            known = symbol in vocabulary
        except TypeError:
            known = False
        if not known:
            unknown.setdefault(repr(symbol), []).append(t)
    if unknown:
        raise InvalidInput("observations contain unknown symbols, got {0}."
                           .format(", ".join(
                               "{0} at {1}".format(symbol, positions)
                               for symbol, positions in unknown.items())))
    return observations
