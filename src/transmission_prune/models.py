#!/usr/bin/env python3
"""Data models for Transmission prune."""

from dataclasses import dataclass, field
from typing import Any, List, Optional


@dataclass(frozen=True)
class TorrentInfo:
    """Snapshot of the torrent fields the prune pass looks at."""
    id: int
    name: str
    is_finished: Optional[bool]
    downloaded_ever: int
    uploaded_ever: int
    percent_done: float = 0.0

    @classmethod
    def from_rpc(cls, torrent: Any) -> "TorrentInfo":
        """
        Build a snapshot from a ``transmission_rpc.Torrent``.

        Reads the raw RPC fields so that a field the daemon did not send
        becomes ``None`` or zero instead of raising.

        Args:
            torrent: Torrent object returned by ``Client.get_torrents``

        Returns:
            Processed TorrentInfo
        """
        fields = torrent.fields
        return cls(
            id=int(fields["id"]),
            name=str(fields.get("name", "")),
            is_finished=fields.get("isFinished"),
            downloaded_ever=int(fields.get("downloadedEver") or 0),
            uploaded_ever=int(fields.get("uploadedEver") or 0),
            percent_done=float(fields.get("percentDone") or 0.0),
        )

    @property
    def ratio(self) -> Optional[int]:
        """Integer upload ratio, or None if nothing was downloaded."""
        if self.downloaded_ever == 0:
            return None
        return self.uploaded_ever // self.downloaded_ever


@dataclass(frozen=True)
class RemovalCandidate:
    """Torrent marked for removal."""
    info: TorrentInfo
    ratio: int
    threshold: int

    def format_reason(self) -> str:
        """Format removal reason for logging."""
        return (
            f"id={self.info.id}, ratio={self.ratio}/{self.threshold}, "
            f"down={self.info.downloaded_ever}, up={self.info.uploaded_ever}, "
            f"done={self.info.percent_done * 100:.0f}%"
        )


@dataclass
class PruneResult:
    """Result of one prune pass."""
    fetched: bool = False
    total: int = 0
    candidates: List[RemovalCandidate] = field(default_factory=list)
    removed: bool = False
    dry_run: bool = False
    error: Optional[str] = None

    @property
    def ids(self) -> List[int]:
        """Torrent IDs selected for removal."""
        return [c.info.id for c in self.candidates]

    @property
    def count(self) -> int:
        """Number of torrents selected for removal."""
        return len(self.candidates)

    @property
    def succeeded(self) -> bool:
        """True if the pass finished without a fetch or removal error."""
        return self.fetched and self.error is None
