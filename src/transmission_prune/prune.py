#!/usr/bin/env python3
"""Prune pass orchestration."""

import logging

from .classifier import TorrentClassifier
from .client import TransmissionClient
from .config import PruneConfig
from .models import PruneResult
from .utils import truncate_name

logger = logging.getLogger(__name__)


class TransmissionPrune:
    """Runs fetch, filter and remove against a connected client."""

    def __init__(self, config: PruneConfig, client: TransmissionClient):
        """
        Initialize prune orchestrator.

        Args:
            config: Removal criteria and behavior
            client: Connected Transmission client
        """
        self.config = config
        self.client = client
        self.classifier = TorrentClassifier(config.ratio)

    def delete_completed(self) -> PruneResult:
        """
        Run one prune pass.

        Fetch and removal errors are logged and reported in the result,
        never raised.

        Returns:
            Outcome of the pass
        """
        result = PruneResult(dry_run=self.config.dry_run)

        torrents = self.client.get_torrents()
        if torrents is None:
            result.error = "failed to fetch torrents"
            return result

        result.fetched = True
        result.total = len(torrents)
        logger.debug(f"Found {len(torrents)} torrents")

        result.candidates = self.classifier.classify(torrents)
        if not result.candidates:
            logger.info("No completed torrents")
            return result

        logger.info(f"Torrent IDs to remove: {result.ids} (count={result.count})")

        if self.config.dry_run:
            logger.info(f"[DRY RUN] Would remove {result.count} torrents")
            for i, candidate in enumerate(result.candidates[:5]):
                logger.info(f"  {i+1}. {truncate_name(candidate.info.name, 40)}")
            if result.count > 5:
                logger.info(f"  ... and {result.count - 5} more")
            return result

        if self.client.remove_torrents(result.ids, self.config.delete_data):
            result.removed = True
            action = "Removed (with data)" if self.config.delete_data else "Removed (torrent only)"
            logger.info(f"[{action}] {result.count} torrents")
        else:
            result.error = "failed to remove torrents"

        return result
