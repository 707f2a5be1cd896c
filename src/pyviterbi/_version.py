"""Version of the PyViterbi package."""

__version__ = "0.1.0"
