"""The :mod:`pyviterbi.datasets` includes base toy models."""

# Authors: Peter Steiner <peter.steiner@tu-dresden.de>
# License: BSD 3 clause

from ..hmm import HiddenMarkovModel


PART_OF_SPEECH_LABELS = ('Noun', 'Verb', 'Adjective')
PART_OF_SPEECH_SYMBOLS = ('cat', 'run', 'fast', 'dog', 'jump', 'big')


def load_part_of_speech() -> HiddenMarkovModel:
    """
    Load the toy part-of-speech tagging model.

    Three grammatical categories emit six English words. Each call returns
    a new model instance.

    =================   ===========================================
    Labels              Noun, Verb, Adjective
    Symbols             cat, run, fast, dog, jump, big
    =================   ===========================================

    Returns
    -------
    model : HiddenMarkovModel

    Examples
    --------
    >>> from pyviterbi.datasets import load_part_of_speech
    >>> model = load_part_of_speech()
    >>> model.transition_probability('Adjective', 'Noun')
    0.5
    """
    return HiddenMarkovModel(
        labels=PART_OF_SPEECH_LABELS,
        symbols=PART_OF_SPEECH_SYMBOLS,
        initial={'Noun': 0.4, 'Verb': 0.3, 'Adjective': 0.3},
        transition={
            'Noun': {'Noun': 0.3, 'Verb': 0.5, 'Adjective': 0.2},
            'Verb': {'Noun': 0.4, 'Verb': 0.2, 'Adjective': 0.4},
            'Adjective': {'Noun': 0.5, 'Verb': 0.3, 'Adjective': 0.2}},
        emission={
            'Noun': {'cat': 0.4, 'run': 0.1, 'fast': 0.1, 'dog': 0.3,
                     'jump': 0.05, 'big': 0.05},
            'Verb': {'cat': 0.05, 'run': 0.4, 'fast': 0.1, 'dog': 0.05,
                     'jump': 0.35, 'big': 0.05},
            'Adjective': {'cat': 0.05, 'run': 0.1, 'fast': 0.35, 'dog': 0.05,
                          'jump': 0.1, 'big': 0.35}})
