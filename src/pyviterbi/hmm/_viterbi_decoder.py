"""The :mod:`viterbi_decoder` contains a Viterbi decoder."""

# Authors: Peter Steiner <peter.steiner@tu-dresden.de>
# License: BSD 3 clause

from __future__ import annotations

import logging
from numbers import Real
from typing import (Any, Dict, Hashable, Iterable, List, Optional, Sequence,
                    Tuple)

import numpy as np
import pandas as pd
from joblib import Parallel, delayed
from sklearn.base import BaseEstimator
from sklearn.utils.validation import check_is_fitted

from ._model import HiddenMarkovModel


logger = logging.getLogger(__name__)

EMISSION_FLOOR = 1e-5
"""Probability used for a missing emission entry (rare, but not impossible)."""


def _log(x: np.ndarray) -> np.ndarray:
    """Natural logarithm that maps explicit zeros to -inf silently."""
    with np.errstate(divide='ignore'):
        return np.log(x)


def _check_emission_floor(emission_floor: Any) -> float:
    if isinstance(emission_floor, bool) \
            or not isinstance(emission_floor, (Real, np.number)) \
            or not 0. < float(emission_floor) <= 1.:
        raise ValueError("emission_floor must be in (0, 1], got {0}."
                         .format(emission_floor))
    return float(emission_floor)


def _check_model(model: Any) -> HiddenMarkovModel:
    if not isinstance(model, HiddenMarkovModel):
        raise TypeError("model should be a HiddenMarkovModel, got '{0}' "
                        "(type {1}).".format(model, type(model)))
    return model


def _log_tables(model: HiddenMarkovModel, emission_floor: float) \
        -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Compute the log-space tables of a model.

    Missing and zero emission entries are replaced by the emission floor
    before the logarithm is taken. Zeros in the initial and transition
    tables become -inf.
    """
    emission = model.emission
    emission = np.where(np.isnan(emission) | (emission == 0.),
                        emission_floor, emission)
    return _log(model.initial), _log(model.transition), _log(emission)


def _emission_columns(model: HiddenMarkovModel, observations: Sequence,
                      log_emission: np.ndarray, log_floor: float) \
        -> np.ndarray:
    """Return the log emission of every label per time step (T, n_labels)."""
    columns = np.full((len(observations), model.n_labels), log_floor)
    for t, symbol in enumerate(observations):
        column = model.symbol_index(symbol)
        if column is not None:
            columns[t] = log_emission[:, column]
    return columns


def _viterbi(model: HiddenMarkovModel, observations: Sequence,
             log_initial: np.ndarray, log_transition: np.ndarray,
             log_emission: np.ndarray, log_floor: float) -> DecodeResult:
    """
    Run the Viterbi recursion in log space.

    Parameters
    ----------
    model : HiddenMarkovModel
    observations : Sequence
        Observation sequence of length T.
    log_initial : np.ndarray of shape (n_labels, )
    log_transition : np.ndarray of shape (n_labels, n_labels)
    log_emission : np.ndarray of shape (n_labels, n_emission_symbols)
        Floor-substituted log emission table.
    log_floor : float
        Log emission used for symbols the model does not know.

    Returns
    -------
    result : DecodeResult
    """
    n_steps, n_labels = len(observations), model.n_labels
    scores = np.empty((n_steps, n_labels))
    backpointers = np.full((n_steps, n_labels), -1, dtype=int)
    path = np.full(n_steps, -1, dtype=int)
    if n_steps == 0:
        return DecodeResult(model.labels, observations, scores, backpointers,
                            path)

    emission = _emission_columns(model, observations, log_emission, log_floor)
    scores[0] = log_initial + emission[0]
    labels = np.arange(n_labels)
    for t in range(1, n_steps):
        # candidates[p, c]: score of reaching label c at t via label p
        candidates = (scores[t - 1][:, np.newaxis] + log_transition
                      + emission[t][np.newaxis, :])
        # argmax keeps the first maximum in label order
        best = np.argmax(candidates, axis=0)
        scores[t] = candidates[best, labels]
        reachable = scores[t] > -np.inf
        backpointers[t, reachable] = best[reachable]

    last = int(np.argmax(scores[-1]))
    if scores[-1, last] > -np.inf:
        path[-1] = last
    for t in range(n_steps - 2, -1, -1):
        if path[t + 1] >= 0:
            path[t] = backpointers[t + 1, path[t + 1]]
    return DecodeResult(model.labels, observations, scores, backpointers,
                        path)


def decode(model: HiddenMarkovModel, observations: Iterable[Hashable], *,
           emission_floor: float = EMISSION_FLOOR) -> DecodeResult:
    """
    Find the most probable label sequence for an observation sequence.

    Parameters
    ----------
    model : HiddenMarkovModel
        The static model.
    observations : Iterable[Hashable]
        The observation sequence. Symbols unknown to the model are tolerated
        and receive the emission floor for every label.
    emission_floor : float, default = EMISSION_FLOOR
        Probability used for missing emission entries. Must be in (0, 1].

    Returns
    -------
    result : DecodeResult
        The best path and the full lattice.

    Examples
    --------
    >>> from pyviterbi.datasets import load_part_of_speech
    >>> from pyviterbi.hmm import decode
    >>> decode(load_part_of_speech(), ['fast', 'run']).best_path
    ('Adjective', 'Verb')
    """
    model = _check_model(model)
    emission_floor = _check_emission_floor(emission_floor)
    observations = tuple(observations)
    log_initial, log_transition, log_emission = _log_tables(
        model, emission_floor)
    result = _viterbi(model, observations, log_initial, log_transition,
                      log_emission, float(np.log(emission_floor)))
    _log_result(result)
    return result


def _log_result(result: DecodeResult) -> None:
    logger.debug("Decoded %d observations, log-probability %s.",
                 len(result), result.log_probability)
    undetermined = [t for t, label in enumerate(result.best_path)
                    if label is None]
    if undetermined:
        logger.warning("Best path is undetermined at positions %s.",
                       undetermined)


class DecodeResult:
    """
    Result of a Viterbi decoding.

    Holds the best path and the full score lattice. All arrays are read-only.

    Parameters
    ----------
    labels : Tuple
        The ordered labels of the model, i.e. the columns of the lattice.
    observations : Sequence
        The decoded observation sequence of length T.
    scores : np.ndarray of shape (T, n_labels)
        Best cumulative log-probability of any path ending in a label.
    backpointer_indices : np.ndarray of shape (T, n_labels)
        Ordinal of the best predecessor label, -1 if there is none.
    path_indices : np.ndarray of shape (T, )
        Ordinals of the best path, -1 for undetermined positions.
    """

    def __init__(self, labels: Tuple, observations: Sequence,
                 scores: np.ndarray, backpointer_indices: np.ndarray,
                 path_indices: np.ndarray) -> None:
        """Construct the DecodeResult."""
        self._labels = tuple(labels)
        self._observations = tuple(observations)
        self._scores = scores
        self._backpointer_indices = backpointer_indices
        self._path_indices = path_indices
        for array in (scores, backpointer_indices, path_indices):
            array.setflags(write=False)
        self._best_path = tuple(self._label(k) for k in path_indices)

    def _label(self, index: int) -> Optional[Hashable]:
        return self._labels[index] if index >= 0 else None

    @property
    def labels(self) -> Tuple:
        return self._labels

    @property
    def observations(self) -> Tuple:
        return self._observations

    @property
    def best_path(self) -> Tuple:
        """Return the best label per position, None if undetermined."""
        return self._best_path

    @property
    def scores(self) -> np.ndarray:
        """Return the log-probability lattice of shape (T, n_labels)."""
        return self._scores

    @property
    def backpointer_indices(self) -> np.ndarray:
        """Return the predecessor ordinals of shape (T, n_labels)."""
        return self._backpointer_indices

    @property
    def path_indices(self) -> np.ndarray:
        return self._path_indices

    @property
    def log_probability(self) -> Optional[float]:
        """Return the log-probability of the best path or None."""
        if len(self) == 0 or self._path_indices[-1] < 0:
            return None
        return float(self._scores[-1, self._path_indices[-1]])

    @property
    def backpointers(self) -> List[Dict[Hashable, Optional[Hashable]]]:
        """Return the predecessor label of every label per time step."""
        return [{label: self._label(k) for label, k in zip(self._labels, row)}
                for row in self._backpointer_indices]

    @property
    def lattice(self) -> List[Dict[Hashable, float]]:
        """Return the score of every label per time step."""
        return [dict(zip(self._labels, row)) for row in self._scores.tolist()]

    def to_frame(self) -> pd.DataFrame:
        """
        Return the lattice as a table.

        Returns
        -------
        frame : pd.DataFrame
            One row per time step, indexed by the time step and the
            observation. One score column per label and the column
            ``best_label``.

        Raises
        ------
        ValueError
            If a label is named ``best_label``.
        """
        if "best_label" in self._labels:
            raise ValueError("The label 'best_label' collides with the path "
                             "column of the table, got labels {0}."
                             .format(self._labels))
        index = pd.MultiIndex.from_arrays(
            [list(range(len(self))), list(self._observations)],
            names=["t", "observation"])
        frame = pd.DataFrame(self._scores, index=index,
                             columns=list(self._labels))
        frame["best_label"] = list(self._best_path)
        return frame

    def __len__(self) -> int:
        return len(self._best_path)

    def __repr__(self) -> str:
        return "{0}(best_path={1!r}, log_probability={2!r})".format(
            type(self).__name__, self._best_path, self.log_probability)


class ViterbiDecoder(BaseEstimator):
    """
    Viterbi decoder for a discrete Hidden Markov Model.

    The log-space tables of the model are computed once in ``fit`` and
    reused for every decoded sequence.

    Parameters
    ----------
    model : Optional[HiddenMarkovModel], default = None
        The static model. Required before calling ``fit``.
    emission_floor : float, default = EMISSION_FLOOR
        Probability used for missing emission entries. Must be in (0, 1].

    Attributes
    ----------
    log_initial_ : np.ndarray of shape (n_labels, )
    log_transition_ : np.ndarray of shape (n_labels, n_labels)
    log_emission_ : np.ndarray of shape (n_labels, n_emission_symbols)
        Log emission table with the floor substituted for missing entries.

    Examples
    --------
    >>> from pyviterbi.datasets import load_part_of_speech
    >>> from pyviterbi.hmm import ViterbiDecoder
    >>> decoder = ViterbiDecoder(model=load_part_of_speech()).fit()
    >>> decoder.predict(['cat'])
    ['Noun']
    """

    def __init__(self, *, model: Optional[HiddenMarkovModel] = None,
                 emission_floor: float = EMISSION_FLOOR) -> None:
        """Construct the ViterbiDecoder."""
        self.model = model
        self.emission_floor = emission_floor

    def fit(self, X: Any = None, y: None = None) -> ViterbiDecoder:
        """
        Fit the ViterbiDecoder. Compute the log-space tables of the model.

        Parameters
        ----------
        X : None
            Ignored. The model is static.
        y : None
            Ignored.

        Returns
        -------
        self : returns a fitted ViterbiDecoder.
        """
        self._validate_hyperparameters()
        self.log_initial_, self.log_transition_, self.log_emission_ = \
            _log_tables(self.model, self.emission_floor)
        return self

    def _validate_hyperparameters(self) -> None:
        """Validate the hyperparameters."""
        _check_model(self.model)
        _check_emission_floor(self.emission_floor)

    def _decode(self, X: Iterable[Hashable]) -> DecodeResult:
        return _viterbi(self.model, tuple(X), self.log_initial_,
                        self.log_transition_, self.log_emission_,
                        float(np.log(self.emission_floor)))

    def decode(self, X: Iterable[Hashable]) -> DecodeResult:
        """
        Decode an observation sequence.

        Parameters
        ----------
        X : Iterable[Hashable]
            Observation sequence of length T.

        Returns
        -------
        result : DecodeResult
        """
        check_is_fitted(self)
        result = self._decode(X)
        _log_result(result)
        return result

    def predict(self, X: Iterable[Hashable]) -> List[Optional[Hashable]]:
        """
        Predict the best label sequence.

        Parameters
        ----------
        X : Iterable[Hashable]
            Observation sequence of length T.

        Returns
        -------
        y : List[Optional[Hashable]] of length T
            Best label per position, None where undetermined.
        """
        return list(self.decode(X).best_path)

    def decode_sequences(self, sequences: Iterable[Iterable[Hashable]],
                         n_jobs: Optional[int] = None) -> List[DecodeResult]:
        """
        Decode several independent observation sequences.

        Parameters
        ----------
        sequences : Iterable[Iterable[Hashable]]
        n_jobs : Optional[int], default = None
            The number of jobs to run in parallel using joblib.
            ``None`` means 1 unless in a ``joblib.parallel_backend`` context.

        Returns
        -------
        results : List[DecodeResult]
            One result per sequence, in input order.
        """
        check_is_fitted(self)
        log_floor = float(np.log(self.emission_floor))
        results = Parallel(n_jobs=n_jobs)(
            delayed(_viterbi)(self.model, tuple(X), self.log_initial_,
                              self.log_transition_, self.log_emission_,
                              log_floor)
            for X in sequences)
        for result in results:
            _log_result(result)
        return results
