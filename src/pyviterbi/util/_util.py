"""The :mod:`pyviterbi.util` has utilities for running and analyzing."""

# Authors: Peter Steiner <peter.steiner@tu-dresden.de>
# License: BSD 3 clause

import sys
import os
import logging
import argparse
from typing import Optional, Union


argument_parser = argparse.ArgumentParser(
    description='Standard input parser for decoding scripts of PyViterbi.')
argument_parser.add_argument('-o', '--out', metavar='outdir', nargs='?',
                             help='output directory for logfiles',
                             dest='out', type=str)
argument_parser.add_argument('-m', '--model', metavar='model', nargs='?',
                             help='JSON file with a model configuration',
                             dest='model', type=str)
argument_parser.add_argument('--emission-floor', metavar='floor',
                             help='probability of missing emission entries',
                             dest='emission_floor', type=float, default=None)
argument_parser.add_argument(dest='params', metavar='params', nargs='*',
                             help='observation symbols to decode')

# noinspection PyArgumentList
logging.basicConfig(
    level=logging.INFO,
    handlers=[logging.StreamHandler(sys.stdout)]
)


def new_logger(name: str, directory: Optional[str] = None,
               level: Union[int, str] = logging.NOTSET) -> logging.Logger:
    """
    Register a new logger that writes to ``<directory>/<name>.log``.

    Parameters
    ----------
    name : str
        Name of the logger and of the logfile. Use ``"pyviterbi"`` to
        capture the records of the library modules.
    directory : Optional[str], default = None
        Directory of the logfile. The current working directory if None.
    level : Union[int, str], default = logging.NOTSET

    Returns
    -------
    logger : logging.Logger
    """
    if directory is None:
        directory = os.getcwd()
    logger = logging.getLogger(name)
    logger.setLevel(level)
    formatter = logging.Formatter(
        fmt='%(asctime)s %(levelname)s %(name)s %(message)s')
    handler = logging.FileHandler(
        os.path.join(directory, '{0}.log'.format(name)))
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return logger
