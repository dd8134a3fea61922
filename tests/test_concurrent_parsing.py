"""Concurrent parsing tests.

Parsing is stateless apart from the locale, pattern, and duration caches.
These tests hit the parser from many threads, including while the caches are
being cleared, and check that every thread sees the same results as a
sequential run.

Structure:
    - TestConcurrentParsingBasic: Essential tests (run in every CI build)
    - TestConcurrentParsingIntensive: Fuzz-marked intensive tests
"""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime

import pytest

from timerparse import TimerStartToken, clear_caches, parse

INPUTS: tuple[tuple[str, str], ...] = (
    ("5", "en_US"),
    ("2h 15m", "en_US"),
    ("1,5 h", "de_DE"),
    ("5:30pm", "en_US"),
    ("next friday", "en_GB"),
    ("02/03/2024", "en_US"),
    ("02/03/2024", "en_GB"),
    ("24/02/03", "ja_JP"),
    ("christmas at noon", "fr_FR"),
    ("tomorrow at 1430h", "en_GB"),
)

REFERENCE = datetime(2024, 1, 1)


def _expected() -> dict[tuple[str, str], TimerStartToken]:
    return {key: parse(*key) for key in INPUTS}


class TestConcurrentParsingBasic:
    """Essential thread safety tests that run in every CI build."""

    def test_parallel_results_match_sequential(self) -> None:
        expected = _expected()
        work = list(INPUTS) * 10

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(lambda key: parse(*key), work))

        for key, token in zip(work, results, strict=True):
            assert token == expected[key]

    def test_cold_caches(self) -> None:
        expected = _expected()
        clear_caches()
        barrier = threading.Barrier(len(INPUTS))

        def parse_after_barrier(key: tuple[str, str]) -> TimerStartToken:
            barrier.wait()
            return parse(*key)

        with ThreadPoolExecutor(max_workers=len(INPUTS)) as executor:
            results = list(executor.map(parse_after_barrier, INPUTS))

        assert results == [expected[key] for key in INPUTS]

    def test_end_times_in_parallel(self) -> None:
        tokens = list(_expected().values())
        sequential = [token.try_get_end_time(REFERENCE) for token in tokens]

        with ThreadPoolExecutor(max_workers=4) as executor:
            parallel = list(executor.map(lambda t: t.try_get_end_time(REFERENCE), tokens))

        assert parallel == sequential


@pytest.mark.fuzz
class TestConcurrentParsingIntensive:
    """Cache clearing interleaved with parsing."""

    def test_clearing_caches_while_parsing(self) -> None:
        expected = _expected()
        stop = threading.Event()
        failures: list[Exception] = []
        lock = threading.Lock()

        def clear_repeatedly() -> None:
            while not stop.is_set():
                clear_caches()

        def parse_repeatedly(key: tuple[str, str]) -> None:
            try:
                for _ in range(50):
                    assert parse(*key) == expected[key]
            except Exception as e:  # noqa: BLE001
                with lock:
                    failures.append(e)

        clearer = threading.Thread(target=clear_repeatedly)
        clearer.start()
        try:
            workers = [threading.Thread(target=parse_repeatedly, args=(key,)) for key in INPUTS]
            for worker in workers:
                worker.start()
            for worker in workers:
                worker.join()
        finally:
            stop.set()
            clearer.join()

        assert failures == []
