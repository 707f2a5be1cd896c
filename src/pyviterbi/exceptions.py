"""The :mod:`pyviterbi.exceptions` includes all custom warnings and errors."""

# Authors: Peter Steiner <peter.steiner@tu-dresden.de>
# License: BSD 3 clause


class ModelError(ValueError):
    """
    Exception class to raise if a Hidden Markov Model is malformed.

    This class inherits from ValueError, so that existing code that catches
    ValueError for invalid parameters keeps working.

    Examples
    --------
    >>> from pyviterbi.hmm import HiddenMarkovModel
    >>> from pyviterbi.exceptions import ModelError
    >>> try:
    ...     HiddenMarkovModel(labels=[], symbols=['x'], initial={},
    ...                       transition={}, emission={})
    ... except ModelError as e:
    ...     print(repr(e))
    ModelError('labels must not be empty.')
    """


class InvalidInput(ValueError):
    """
    Exception class to raise if an observation sequence is not accepted.

    The decoder itself never raises it. It is raised by
    :func:`pyviterbi.hmm.check_observations` before decoding, e.g. for
    symbols outside the vocabulary of a model.
    """
