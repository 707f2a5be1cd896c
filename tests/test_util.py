"""Testing for pyviterbi.util module"""
import os
import logging

from pyviterbi.util import new_logger, argument_parser


def test_new_logger(tmp_path) -> None:
    directory = str(tmp_path)
    logger = new_logger(name='test_logger', directory=directory)
    logger.info('Test')
    for handler in logger.handlers:
        handler.flush()
    assert os.path.isfile(os.path.join(directory, 'test_logger.log'))
    with open(os.path.join(directory, 'test_logger.log')) as f:
        assert 'INFO test_logger Test' in f.read()


def test_new_logger_level(tmp_path) -> None:
    logger = new_logger(name='test_logger_level', directory=str(tmp_path),
                        level=logging.WARNING)
    assert logger.level == logging.WARNING


def test_argument_parser() -> None:
    args = argument_parser.parse_args(['-o', './', 'cat', 'run'])
    assert os.path.isdir(args.out)
    assert args.params == ['cat', 'run']
    assert args.model is None
    assert args.emission_floor is None


def test_argument_parser_model() -> None:
    args = argument_parser.parse_args(
        ['-m', 'model.json', '--emission-floor', '1e-3', 'x'])
    assert args.model == 'model.json'
    assert args.emission_floor == 1e-3
    assert args.params == ['x']
