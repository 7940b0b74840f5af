"""Mimic: generic functional programming helpers."""

from mimic.functional import *  # noqa: F401,F403
from mimic.functional import __all__

__version__ = "0.1.0"
