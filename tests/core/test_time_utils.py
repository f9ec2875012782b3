from datetime import datetime, timezone

from core.utils.time import utc_now_iso


def test_returns_utc_iso8601() -> None:
    parsed = datetime.fromisoformat(utc_now_iso())

    assert parsed.tzinfo == timezone.utc


def test_is_close_to_current_time() -> None:
    before = datetime.now(timezone.utc)
    parsed = datetime.fromisoformat(utc_now_iso())
    after = datetime.now(timezone.utc)

    assert before <= parsed <= after
