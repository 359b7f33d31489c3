#!/usr/bin/env python3
"""Transmission Prune - remove finished torrents that reached a ratio."""

__version__ = "1.0.0"
__license__ = "MIT"

from .config import Config
from .prune import TransmissionPrune

__all__ = ["TransmissionPrune", "Config", "__version__"]
