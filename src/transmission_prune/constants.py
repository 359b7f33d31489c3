#!/usr/bin/env python3
"""Constants for Transmission prune."""

import logging
from typing import Final

# Network constants
RPC_PATH_SUFFIX: Final[str] = "/transmission/rpc"
DEFAULT_TIMEOUT: Final[int] = 30
ALLOWED_SCHEMES: Final[frozenset] = frozenset(("http", "https"))

# RPC protocol range this tool speaks (Transmission 2.40 through 4.x)
MIN_RPC_VERSION: Final[int] = 14
RPC_VERSION: Final[int] = 17

# Prune defaults
DEFAULT_RATIO: Final[int] = 2
DEFAULT_INTERVAL: Final[str] = "5m"

# Longest single wait between interval checks
MAX_WAIT_SLICE: Final[float] = 86400.0

# Logging
DEFAULT_LOG_LEVEL: Final[str] = "info"
LOG_LEVELS: Final[dict] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

# Raw torrent-get fields read into TorrentInfo
TORRENT_FIELDS: Final[tuple] = (
    "id",
    "name",
    "isFinished",
    "downloadedEver",
    "uploadedEver",
    "percentDone",
)
