import logging

from collatz_search import Interval, LoggingObserver


def test_checkpoint_logs_step_and_pairs(caplog):
    caplog.set_level(logging.INFO, logger="collatz_search")
    LoggingObserver().on_checkpoint(20000, [Interval(1, 9), Interval(12, 12)])
    assert "Step 20000" in caplog.messages
    assert "[(1, 9), (12, 12)]" in caplog.messages


def test_base_proven_is_debug_only(caplog):
    caplog.set_level(logging.INFO, logger="collatz_search")
    observer = LoggingObserver()
    observer.on_base_proven(7, 4)
    assert caplog.records == []

    caplog.set_level(logging.DEBUG, logger="collatz_search")
    observer.on_base_proven(7, 4)
    assert caplog.messages == ["Conjecture validated for 7 at 4"]


def test_cycle_is_a_warning(caplog):
    caplog.set_level(logging.INFO, logger="collatz_search")
    LoggingObserver().on_cycle(42)
    (record,) = caplog.records
    assert record.levelno == logging.WARNING
    assert "'42'" in record.getMessage()


def test_custom_logger(caplog):
    logger = logging.getLogger("collatz_search.test")
    caplog.set_level(logging.INFO, logger="collatz_search.test")
    LoggingObserver(logger).on_checkpoint(0, [])
    assert [r.name for r in caplog.records] == ["collatz_search.test", "collatz_search.test"]
