"""Testes da resolução do prazo de validade do token."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from zoneinfo import ZoneInfo

import pytest

from app.services.expiration_resolver import parse_expiration_days, resolve_expiration

NOW = datetime(2026, 10, 19, 15, 30, 45, tzinfo=UTC)


class TestParseExpirationDays:
    """Extração do número de dias do texto livre."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("90日", 90),
            ("有効期限は 30日 でお願いします", 30),
            ("1日", 1),
        ],
    )
    def test_recognized_texts(self, text: str, expected: int) -> None:
        assert parse_expiration_days(text) == (expected, None)

    @pytest.mark.parametrize(
        ("text", "reason"),
        [
            ("", "empty_text"),
            ("   ", "empty_text"),
            (None, "empty_text"),
            (90, "empty_text"),
            ("abc", "format_not_recognized"),
            ("90 days", "format_not_recognized"),
            ("0日", "non_positive_days"),
            ("-5日", "non_positive_days"),
            ("９０日", "format_not_recognized"),
            ("9" * 5000 + "日", "days_out_of_range"),
        ],
    )
    def test_unrecognized_texts_report_reason(self, text: object, reason: str) -> None:
        assert parse_expiration_days(text) == (None, reason)


class TestResolveExpiration:
    """Instante absoluto UTC truncado ao início do dia."""

    def test_offset_is_added_and_truncated_to_day_start(self) -> None:
        assert resolve_expiration("90日", 30, NOW) == "2027-01-17T00:00:00Z"

    def test_unrecognized_text_uses_default_days(self) -> None:
        assert resolve_expiration("abc", 30, NOW) == "2026-11-18T00:00:00Z"

    def test_default_matches_explicit_same_days(self) -> None:
        assert resolve_expiration("", 30, NOW) == resolve_expiration("30日", 7, NOW)

    def test_fallback_is_logged_with_reason(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.INFO, logger="app.services.expiration_resolver")

        resolve_expiration("0日", 14, NOW)

        fallbacks = [r for r in caplog.records if getattr(r, "fallback_used", False)]
        assert len(fallbacks) == 1
        assert fallbacks[0].reason == "non_positive_days"
        assert fallbacks[0].default_days == 14

    def test_recognized_text_does_not_log_fallback(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="app.services.expiration_resolver")

        resolve_expiration("10日", 30, NOW)

        assert not [r for r in caplog.records if getattr(r, "fallback_used", False)]

    def test_non_utc_reference_is_converted_before_adding(self) -> None:
        tokyo_morning = datetime(2026, 10, 19, 8, 0, tzinfo=ZoneInfo("Asia/Tokyo"))
        # 08:00 JST = 23:00 UTC do dia anterior
        assert resolve_expiration("1日", 30, tokyo_morning) == "2026-10-19T00:00:00Z"

    def test_naive_reference_is_treated_as_utc(self) -> None:
        naive = datetime(2026, 10, 19, 23, 59, 59)
        assert resolve_expiration("1日", 30, naive) == "2026-10-20T00:00:00Z"

    def test_out_of_range_days_fall_back_to_default(self) -> None:
        assert resolve_expiration("99999999日", 30, NOW) == "2026-11-18T00:00:00Z"

    def test_digit_run_beyond_int_conversion_limit_falls_back(self) -> None:
        assert resolve_expiration("9" * 5000 + "日", 30, NOW) == "2026-11-18T00:00:00Z"

    def test_full_width_digits_fall_back_to_default(self) -> None:
        assert resolve_expiration("９０日", 30, NOW) == "2026-11-18T00:00:00Z"

    def test_is_deterministic(self) -> None:
        results = {resolve_expiration("45日", 30, NOW) for _ in range(3)}
        assert len(results) == 1
