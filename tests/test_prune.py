from unittest.mock import Mock

from transmission_prune.config import PruneConfig
from transmission_prune.prune import TransmissionPrune

from conftest import make_info


def _pruner(torrents, remove_ok=True, **config):
    client = Mock()
    client.get_torrents.return_value = torrents
    client.remove_torrents.return_value = remove_ok
    return TransmissionPrune(PruneConfig(**config), client), client


def test_removes_matching_torrents_in_one_request(sample_torrents):
    pruner, client = _pruner(sample_torrents, ratio=2)
    result = pruner.delete_completed()

    client.remove_torrents.assert_called_once_with([1], True)
    assert result.removed is True
    assert result.total == 2
    assert result.ids == [1]
    assert result.succeeded is True


def test_empty_list_issues_no_removal(caplog):
    pruner, client = _pruner([])
    with caplog.at_level("INFO"):
        result = pruner.delete_completed()

    client.remove_torrents.assert_not_called()
    assert result.succeeded is True
    assert result.count == 0
    assert "No completed torrents" in caplog.text


def test_nothing_matching_issues_no_removal():
    pruner, client = _pruner([make_info(1, True, 10, 19), make_info(2, False, 10, 100)], ratio=2)
    result = pruner.delete_completed()
    client.remove_torrents.assert_not_called()
    assert result.removed is False


def test_fetch_failure_aborts_pass():
    pruner, client = _pruner(None)
    result = pruner.delete_completed()

    client.remove_torrents.assert_not_called()
    assert result.fetched is False
    assert result.succeeded is False


def test_removal_failure_is_reported_not_raised():
    pruner, client = _pruner([make_info(3, True, 10, 50)], remove_ok=False)
    result = pruner.delete_completed()

    client.remove_torrents.assert_called_once_with([3], True)
    assert result.removed is False
    assert result.error == "failed to remove torrents"


def test_keep_data():
    pruner, client = _pruner([make_info(3, True, 10, 50)], delete_data=False)
    pruner.delete_completed()
    client.remove_torrents.assert_called_once_with([3], False)


def test_dry_run_never_removes(caplog):
    torrents = [make_info(i, True, 10, 50) for i in range(1, 8)]
    pruner, client = _pruner(torrents, dry_run=True)
    with caplog.at_level("INFO"):
        result = pruner.delete_completed()

    client.remove_torrents.assert_not_called()
    assert result.dry_run is True
    assert result.count == 7
    assert "[DRY RUN] Would remove 7 torrents" in caplog.text
    assert "... and 2 more" in caplog.text
