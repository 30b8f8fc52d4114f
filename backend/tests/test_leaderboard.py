import threading

import pytest

from app.models.session import LeaderboardEntry
from app.services.leaderboard import InMemoryLeaderboard


def _entry(score, total_time, sid=None):
    return LeaderboardEntry(session_id=sid or f"s{score}-{total_time}", score=score, total_time=total_time, timestamp=0)


def test_orders_by_score_desc_then_time_asc():
    board = InMemoryLeaderboard()
    for score, t in zip([3, 5, 2, 5], [10, 8, 20, 5]):
        board.record("treasure", _entry(score, t))

    ranked = board.list("treasure")
    assert [(r.entry.score, r.entry.total_time) for r in ranked] == [(5, 5), (5, 8), (3, 10), (2, 20)]
    assert [r.rank for r in ranked] == [1, 2, 3, 4]


def test_truncates_to_top_ten():
    board = InMemoryLeaderboard()
    for i in range(15):
        board.record("treasure", _entry(i % 5, 100 - i))

    ranked = board.list("treasure")
    assert len(ranked) == 10
    assert ranked[0].entry.score == 4
    keys = [(-r.entry.score, r.entry.total_time) for r in ranked]
    assert keys == sorted(keys)


def test_boards_are_kept_per_quiz_type():
    board = InMemoryLeaderboard()
    board.record("treasure", _entry(4, 10))
    board.record("mythology", _entry(2, 10))

    assert [r.entry.score for r in board.list("treasure")] == [4]
    assert [r.entry.score for r in board.list("mythology")] == [2]
    assert board.list("programming") == []


def test_custom_size():
    board = InMemoryLeaderboard(size=2)
    for score in (1, 2, 3):
        board.record("q", _entry(score, 1))
    assert [r.entry.score for r in board.list("q")] == [3, 2]


def test_rejects_non_positive_size():
    with pytest.raises(ValueError):
        InMemoryLeaderboard(size=0)


def test_concurrent_records_keep_board_bounded():
    board = InMemoryLeaderboard()

    def _worker(base):
        for i in range(20):
            board.record("q", _entry(base + i, i, sid=f"{base}-{i}"))

    threads = [threading.Thread(target=_worker, args=(n * 100,)) for n in range(5)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    ranked = board.list("q")
    assert len(ranked) == 10
    assert ranked[0].entry.score == 419
