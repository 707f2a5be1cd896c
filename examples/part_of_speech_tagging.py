#!/usr/bin/env python
# coding: utf-8

"""
Tagging words with their part of speech
---------------------------------------

This example decodes a sequence of English words into the most probable
sequence of grammatical categories (Noun, Verb, Adjective) with a Viterbi
decoder.

Usage::

    python part_of_speech_tagging.py fast dog run
    python part_of_speech_tagging.py -m model.json -o ./logs x y

The tutorial is based on numpy, pandas and PyViterbi.
"""
import json
import logging

import matplotlib.pyplot as plt

from pyviterbi.datasets import load_part_of_speech
from pyviterbi.exceptions import InvalidInput
from pyviterbi.hmm import (EMISSION_FLOOR, HiddenMarkovModel, ViterbiDecoder,
                           check_observations)
from pyviterbi.inspection import plot_lattice
from pyviterbi.util import argument_parser, new_logger


args = argument_parser.parse_args()
if args.out is not None:
    new_logger("pyviterbi", directory=args.out)

# Either the toy model or a configuration object with the keys labels,
# symbols, initial, transition and emission.
if args.model is None:
    model = load_part_of_speech()
else:
    with open(args.model, "r") as f:
        model = HiddenMarkovModel.from_dict(json.load(f))
print(model)

words = args.params or ["fast", "dog", "run"]
# The decoder would tolerate unknown words, the example rejects them.
try:
    words = check_observations(model, words)
except InvalidInput as e:
    logging.error(e)
    raise SystemExit(1)

floor = EMISSION_FLOOR if args.emission_floor is None else args.emission_floor
decoder = ViterbiDecoder(model=model, emission_floor=floor).fit()
result = decoder.decode(words)

print("Best path: {0}".format(" ".join(str(label)
                                       for label in result.best_path)))
print("Log-probability: {0}".format(result.log_probability))
print(result.to_frame())

plot_lattice(result)
plt.tight_layout()
plt.show()
