"""The :mod:`model` contains the immutable discrete Hidden Markov Model."""

# Authors: Peter Steiner <peter.steiner@tu-dresden.de>
# License: BSD 3 clause

from __future__ import annotations

import logging
from numbers import Real
from typing import Any, Dict, Hashable, Iterable, Mapping, Optional, Tuple

import numpy as np

from ..exceptions import ModelError


logger = logging.getLogger(__name__)


def _check_universe(values: Iterable[Hashable], name: str) -> Tuple:
    """Return the values as a tuple, reject empty or duplicated sets."""
    if isinstance(values, str):
        raise ModelError("{0} must be a sequence of identifiers, got the "
                         "string {1!r}.".format(name, values))
    try:
        values = tuple(values)
    except TypeError:
        raise ModelError("{0} must be iterable, got {1!r}."
                         .format(name, values)) from None
    if len(values) == 0:
        raise ModelError("{0} must not be empty.".format(name))
    try:
        unique = set(values)
    except TypeError:
        raise ModelError("{0} must be hashable, got {1!r}."
                         .format(name, values)) from None
    if len(unique) != len(values):
        duplicates = sorted({repr(v) for v in values if values.count(v) > 1})
        raise ModelError("{0} must not contain duplicates, got {1}."
                         .format(name, ", ".join(duplicates)))
    return values


def _check_probability(value: Any, name: str) -> float:
    """Return a probability as float, reject non-finite or negative values."""
    if isinstance(value, bool) or not isinstance(value, (Real, np.number)):
        raise ModelError("{0} must be a real number, got {1!r}."
                         .format(name, value))
    value = float(value)
    if not np.isfinite(value) or value < 0.:
        raise ModelError("{0} must be finite and >= 0, got {1}."
                         .format(name, value))
    return value


def _check_mapping(table: Any, name: str) -> Mapping:
    if not isinstance(table, Mapping):
        raise ModelError("{0} must be a mapping, got {1}."
                         .format(name, type(table).__name__))
    return table


def _check_keys(table: Mapping, known: Dict[Hashable, int], name: str) \
        -> None:
    unknown = [key for key in table if key not in known]
    if unknown:
        raise ModelError("{0} contains unknown labels, got {1}."
                         .format(name, ", ".join(repr(u) for u in unknown)))


def _read_only(array: np.ndarray) -> np.ndarray:
    array.setflags(write=False)
    return array


class HiddenMarkovModel:
    """
    Immutable discrete Hidden Markov Model.

    The model owns the ordered label and symbol universes and the three
    probability tables. Labels and symbols are mapped once to ordinals, the
    tables are stored as read-only arrays indexed by these ordinals.

    Parameters
    ----------
    labels : Iterable[Hashable]
        Ordered hidden states. Non-empty, no duplicates. The order defines
        the tie-break order of the decoder.
    symbols : Iterable[Hashable]
        Ordered vocabulary of recognized observations. Non-empty, no
        duplicates.
    initial : Mapping[Hashable, float]
        Start probability for every label.
    transition : Mapping[Hashable, Mapping[Hashable, float]]
        Transition probability ``transition[from][to]`` for every ordered
        pair of labels.
    emission : Mapping[Hashable, Mapping[Hashable, float]]
        Emission probability ``emission[label][symbol]``. May be partial, a
        missing entry is resolved by the decoder. May define symbols that are
        not part of ``symbols``.

    Raises
    ------
    ModelError
        If any of the universes or tables is malformed.

    Examples
    --------
    >>> from pyviterbi.hmm import HiddenMarkovModel
    >>> model = HiddenMarkovModel(
    ...     labels=['Rainy', 'Sunny'], symbols=['walk', 'shop'],
    ...     initial={'Rainy': .6, 'Sunny': .4},
    ...     transition={'Rainy': {'Rainy': .7, 'Sunny': .3},
    ...                 'Sunny': {'Rainy': .4, 'Sunny': .6}},
    ...     emission={'Rainy': {'walk': .1, 'shop': .4},
    ...               'Sunny': {'walk': .6}})
    >>> model.n_labels
    2
    >>> model.emission_probability('Sunny', 'shop') is None
    True
    """

    def __init__(self, labels: Iterable[Hashable],
                 symbols: Iterable[Hashable],
                 initial: Mapping[Hashable, float],
                 transition: Mapping[Hashable, Mapping[Hashable, float]],
                 emission: Mapping[Hashable, Mapping[Hashable, float]]) \
            -> None:
        """Construct the HiddenMarkovModel."""
        self._labels = _check_universe(labels, "labels")
        self._symbols = _check_universe(symbols, "symbols")
        self._label_index = {label: k for k, label in enumerate(self._labels)}

        initial = _check_mapping(initial, "initial")
        _check_keys(initial, self._label_index, "initial")
        missing = [label for label in self._labels if label not in initial]
        if missing:
            raise ModelError("initial needs an entry for every label, missing "
                             "{0}.".format(", ".join(repr(m) for m in missing)))
        initial_ = np.array(
            [_check_probability(initial[label],
                                "initial[{0!r}]".format(label))
             for label in self._labels], dtype=float)

        transition = _check_mapping(transition, "transition")
        _check_keys(transition, self._label_index, "transition")
        transition_ = np.empty((len(self._labels), len(self._labels)))
        for i, source in enumerate(self._labels):
            if source not in transition:
                raise ModelError("transition needs a row for every label, "
                                 "missing {0!r}.".format(source))
            row = _check_mapping(transition[source],
                                 "transition[{0!r}]".format(source))
            _check_keys(row, self._label_index,
                        "transition[{0!r}]".format(source))
            for j, target in enumerate(self._labels):
                if target not in row:
                    raise ModelError("transition needs an entry for every "
                                     "pair of labels, missing ({0!r}, {1!r})."
                                     .format(source, target))
                transition_[i, j] = _check_probability(
                    row[target],
                    "transition[{0!r}][{1!r}]".format(source, target))

        emission = _check_mapping(emission, "emission")
        _check_keys(emission, self._label_index, "emission")
        self._symbol_index = {symbol: k
                              for k, symbol in enumerate(self._symbols)}
        # extra symbols get their columns in label order, then row order
        for label in self._labels:
            if label not in emission:
                continue
            row = _check_mapping(emission[label],
                                 "emission[{0!r}]".format(label))
            for symbol in row:
                if symbol not in self._symbol_index:
                    self._symbol_index[symbol] = len(self._symbol_index)
        emission_ = np.full((len(self._labels), len(self._symbol_index)),
                            np.nan)
        for label, row in emission.items():
            for symbol, value in row.items():
                emission_[self._label_index[label],
                          self._symbol_index[symbol]] = _check_probability(
                    value, "emission[{0!r}][{1!r}]".format(label, symbol))

        self._initial = _read_only(initial_)
        self._transition = _read_only(transition_)
        self._emission = _read_only(emission_)
        logger.debug("Constructed %r with %d missing emission entries.",
                     self, int(np.isnan(self._emission).sum()))

    @classmethod
    def from_arrays(cls, labels: Iterable[Hashable],
                    symbols: Iterable[Hashable], initial: Any,
                    transition: Any, emission: Any) -> HiddenMarkovModel:
        """
        Construct a HiddenMarkovModel from dense array-likes.

        Parameters
        ----------
        labels : Iterable[Hashable]
        symbols : Iterable[Hashable]
        initial : array-like of shape (n_labels, )
        transition : array-like of shape (n_labels, n_labels)
            Rows are the source labels, columns the target labels.
        emission : array-like of shape (n_labels, n_symbols)
            ``NaN`` marks a missing entry.

        Returns
        -------
        model : HiddenMarkovModel
        """
        labels = _check_universe(labels, "labels")
        symbols = _check_universe(symbols, "symbols")
        initial = np.asarray(initial, dtype=float)
        transition = np.asarray(transition, dtype=float)
        emission = np.asarray(emission, dtype=float)
        n_labels, n_symbols = len(labels), len(symbols)
        for name, array, shape in (
                ("initial", initial, (n_labels, )),
                ("transition", transition, (n_labels, n_labels)),
                ("emission", emission, (n_labels, n_symbols))):
            if array.shape != shape:
                raise ModelError("{0} has not the expected shape {1}, given "
                                 "{2}.".format(name, shape, array.shape))
        return cls(
            labels=labels, symbols=symbols,
            initial=dict(zip(labels, initial.tolist())),
            transition={source: dict(zip(labels, row))
                        for source, row in zip(labels, transition.tolist())},
            emission={label: {symbol: value
                              for symbol, value in zip(symbols, row)
                              if not np.isnan(value)}
                      for label, row in zip(labels, emission.tolist())})

    @classmethod
    def from_dict(cls, config: Mapping[str, Any]) -> HiddenMarkovModel:
        """
        Construct a HiddenMarkovModel from a configuration object.

        Parameters
        ----------
        config : Mapping[str, Any]
            Mapping with the keys ``labels``, ``symbols``, ``initial``,
            ``transition`` and ``emission``.

        Returns
        -------
        model : HiddenMarkovModel
        """
        config = _check_mapping(config, "config")
        keys = ("labels", "symbols", "initial", "transition", "emission")
        missing = [key for key in keys if key not in config]
        if missing:
            raise ModelError("config is missing the keys {0}."
                             .format(", ".join(missing)))
        return cls(**{key: config[key] for key in keys})

    def to_dict(self) -> Dict[str, Any]:
        """
        Export the model as a configuration object.

        Missing emission entries are omitted, so that
        ``HiddenMarkovModel.from_dict(model.to_dict()) == model``.

        Returns
        -------
        config : Dict[str, Any]
        """
        symbols = list(self._symbol_index)
        return {
            "labels": list(self._labels),
            "symbols": list(self._symbols),
            "initial": dict(zip(self._labels, self._initial.tolist())),
            "transition": {source: dict(zip(self._labels, row))
                           for source, row in zip(self._labels,
                                                  self._transition.tolist())},
            "emission": {label: {symbol: value
                                 for symbol, value in zip(symbols, row)
                                 if not np.isnan(value)}
                         for label, row in zip(self._labels,
                                               self._emission.tolist())}}

    @property
    def labels(self) -> Tuple:
        """Return the ordered hidden labels."""
        return self._labels

    @property
    def symbols(self) -> Tuple:
        """Return the ordered recognized vocabulary."""
        return self._symbols

    @property
    def n_labels(self) -> int:
        return len(self._labels)

    @property
    def n_symbols(self) -> int:
        return len(self._symbols)

    @property
    def initial(self) -> np.ndarray:
        """Return the read-only initial probabilities of shape (n_labels, )."""
        return self._initial

    @property
    def transition(self) -> np.ndarray:
        """Return the read-only transitions of shape (n_labels, n_labels)."""
        return self._transition

    @property
    def emission(self) -> np.ndarray:
        """
        Return the read-only emission probabilities.

        The array has the shape (n_labels, n_emission_symbols). The first
        ``n_symbols`` columns follow ``symbols``, further columns belong to
        symbols that only appear in the emission table. ``NaN`` marks a
        missing entry.
        """
        return self._emission

    def label_index(self, label: Hashable) -> int:
        """Return the ordinal of a label."""
        try:
            return self._label_index[label]
        except KeyError:
            raise KeyError("Unknown label {0!r}.".format(label)) from None

    def symbol_index(self, symbol: Hashable) -> Optional[int]:
        """Return the emission column of a symbol or None if not modeled."""
        try:
            return self._symbol_index.get(symbol)
        except TypeError:
            return None

    def initial_probability(self, label: Hashable) -> float:
        return float(self._initial[self.label_index(label)])

    def transition_probability(self, source: Hashable,
                               target: Hashable) -> float:
        return float(self._transition[self.label_index(source),
                                      self.label_index(target)])

    def emission_probability(self, label: Hashable,
                             symbol: Hashable) -> Optional[float]:
        """Return the emission probability or None on a lookup miss."""
        column = self.symbol_index(symbol)
        if column is None:
            return None
        value = self._emission[self.label_index(label), column]
        return None if np.isnan(value) else float(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HiddenMarkovModel):
            return NotImplemented
        return (self._labels == other._labels
                and self._symbols == other._symbols
                and self._symbol_index == other._symbol_index
                and np.array_equal(self._initial, other._initial)
                and np.array_equal(self._transition, other._transition)
                and np.array_equal(self._emission, other._emission,
                                   equal_nan=True))

    __hash__ = None  # type: ignore

    def __repr__(self) -> str:
        return "{0}(labels={1!r}, symbols={2!r})".format(
            type(self).__name__, self._labels, self._symbols)
