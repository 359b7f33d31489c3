from transmission_prune.classifier import TorrentClassifier, removal_ratio

from conftest import make_info


def test_unfinished_torrents_are_never_selected():
    classifier = TorrentClassifier(threshold=0)
    torrents = [
        make_info(1, False, 100, 10_000),
        make_info(2, None, 100, 10_000),
    ]
    assert classifier.classify(torrents) == []


def test_zero_downloaded_is_never_selected():
    torrent = make_info(1, True, 0, 10_000)
    assert removal_ratio(torrent, 0) is None
    assert TorrentClassifier(threshold=0).classify([torrent]) == []


def test_finished_torrent_at_threshold_is_selected():
    torrent = make_info(7, True, 100, 200)
    candidates = TorrentClassifier(threshold=2).classify([torrent])
    assert len(candidates) == 1
    assert candidates[0].info.id == 7
    assert candidates[0].ratio == 2
    assert candidates[0].threshold == 2


def test_mixed_list_selects_only_ratio_reached(sample_torrents):
    candidates = TorrentClassifier(threshold=2).classify(sample_torrents)
    assert [c.info.id for c in candidates] == [1]


def test_ratio_uses_integer_truncation():
    # 19 / 10 truncates to 1
    assert removal_ratio(make_info(1, True, 10, 19), 2) is None
    # Uploaded below downloaded never reaches 1
    assert removal_ratio(make_info(2, True, 10, 9), 1) is None
    assert removal_ratio(make_info(3, True, 10, 10), 1) == 1


def test_classify_preserves_daemon_order():
    torrents = [make_info(i, True, 10, 50) for i in (5, 3, 9)]
    candidates = TorrentClassifier(threshold=2).classify(torrents)
    assert [c.info.id for c in candidates] == [5, 3, 9]


def test_empty_list():
    assert TorrentClassifier(threshold=2).classify([]) == []
