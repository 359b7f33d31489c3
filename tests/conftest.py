"""Shared test fixtures and fake RPC objects."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any, Optional

import pytest

from transmission_prune.models import TorrentInfo


class FakeTorrent:
    """Stand-in for transmission_rpc.Torrent carrying raw RPC fields."""

    def __init__(self, **fields: Any) -> None:
        self.fields = fields


def make_info(
    torrent_id: int,
    finished: Optional[bool],
    down: int,
    up: int,
    name: Optional[str] = None,
) -> TorrentInfo:
    return TorrentInfo(
        id=torrent_id,
        name=name or f"torrent-{torrent_id}",
        is_finished=finished,
        downloaded_ever=down,
        uploaded_ever=up,
        percent_done=1.0 if finished else 0.5,
    )


def make_session(rpc_version: int = 17, rpc_version_minimum: int = 14) -> SimpleNamespace:
    return SimpleNamespace(
        rpc_version=rpc_version,
        rpc_version_minimum=rpc_version_minimum,
        version="4.0.5 (a6fe2a64aa)",
    )


@pytest.fixture
def sample_torrents() -> list[TorrentInfo]:
    return [
        make_info(1, True, 100, 300),
        make_info(2, True, 50, 40),
    ]
