import pytest

from sitecrawl.crawler.ledger import VisitedLedger


def test_first_record_inserts_with_count_one():
    ledger = VisitedLedger()
    assert ledger.record("example.com/a") is True
    assert ledger.count("example.com/a") == 1
    assert "example.com/a" in ledger
    assert len(ledger) == 1


def test_repeat_record_increments_without_reinserting():
    ledger = VisitedLedger()
    ledger.record("example.com")
    assert ledger.record("example.com") is False
    assert ledger.record("example.com") is False
    assert ledger.count("example.com") == 3
    assert list(ledger) == ["example.com"]


def test_unknown_key_has_zero_count():
    assert VisitedLedger().count("nowhere") == 0


def test_snapshot_is_read_only_and_live():
    ledger = VisitedLedger()
    ledger.record("example.com")
    view = ledger.snapshot()
    with pytest.raises(TypeError):
        view["example.com/x"] = 5  # type: ignore[index]
    ledger.record("example.com")
    assert view == {"example.com": 2}
