#!/usr/bin/env python3
"""Torrent classification logic."""

import logging
from typing import Iterable, List, Optional

from .models import RemovalCandidate, TorrentInfo
from .utils import truncate_name

logger = logging.getLogger(__name__)


def removal_ratio(torrent: TorrentInfo, threshold: int) -> Optional[int]:
    """
    Check a torrent against the removal criteria.

    A torrent qualifies when the daemon reports it finished, it has
    downloaded something, and its integer ratio is at least ``threshold``.

    Args:
        torrent: Torrent snapshot
        threshold: Minimum integer ratio

    Returns:
        The torrent's ratio if it qualifies, otherwise None
    """
    if torrent.is_finished is not True:
        return None

    ratio = torrent.ratio
    if ratio is None:
        return None

    if ratio < threshold:
        return None

    return ratio


class TorrentClassifier:
    """Selects finished torrents that reached the ratio threshold."""

    def __init__(self, threshold: int):
        """
        Initialize classifier.

        Args:
            threshold: Minimum integer ratio before a finished torrent is removed
        """
        self.threshold = threshold

    def classify(self, torrents: Iterable[TorrentInfo]) -> List[RemovalCandidate]:
        """
        Select torrents for removal.

        Args:
            torrents: Torrent snapshots from the daemon

        Returns:
            Removal candidates, in the order the daemon listed them
        """
        candidates = []

        for torrent in torrents:
            ratio = removal_ratio(torrent, self.threshold)
            if ratio is None:
                logger.debug(
                    f"Keeping {truncate_name(torrent.name)} "
                    f"(id={torrent.id}, finished={torrent.is_finished}, ratio={torrent.ratio})"
                )
                continue

            candidate = RemovalCandidate(info=torrent, ratio=ratio, threshold=self.threshold)
            candidates.append(candidate)

            logger.info(
                f"→ adding to removal list: {truncate_name(torrent.name)} "
                f"({candidate.format_reason()})"
            )

        return candidates
