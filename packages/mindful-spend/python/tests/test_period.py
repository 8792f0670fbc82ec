# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""
Tests for the period lifecycle: creation defaults, partial updates,
closing, activity checks and validation.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from mindful_spend.config import MindfulSpendConfig, PeriodDefaults
from mindful_spend.errors import PeriodValidationError
from mindful_spend.period import (
    close_period,
    create_period,
    generate_period_name,
    is_period_active,
    is_period_closed,
    require_valid_period,
    update_period,
    validate_period,
)
from mindful_spend.types import Period, PeriodUpdate, WalletSetup


# ---------------------------------------------------------------------------
# TestCreatePeriod
# ---------------------------------------------------------------------------


class TestCreatePeriod:
    def test_defaults(self, now: datetime) -> None:
        period = create_period(now=now)
        assert period.name == ""
        assert period.goals == ""
        assert period.target_spend == 0.0
        assert period.target_savings == 0.0
        assert period.reflection == ""
        assert period.start_at == now
        assert period.end_at == now
        assert period.closed_at is None
        assert period.created_at == now
        assert period.updated_at == now

    def test_default_wallet_sized_to_target_spend(self, now: datetime) -> None:
        period = create_period({"target_spend": 800.0}, now=now)
        assert period.wallet_setup == [
            WalletSetup(name="General", spending_limit=800.0, is_default=True)
        ]

    def test_default_wallet_name_is_configurable(self, now: datetime) -> None:
        config = MindfulSpendConfig(periods=PeriodDefaults(default_wallet_name="Everyday"))
        period = create_period({"target_spend": 100.0}, now=now, config=config)
        assert period.wallet_setup[0].name == "Everyday"

    def test_supplied_wallet_setup_is_kept(
        self, now: datetime, wallet_setup: list[WalletSetup]
    ) -> None:
        period = create_period({"wallet_setup": wallet_setup}, now=now)
        assert period.wallet_setup == wallet_setup

    def test_unknown_field_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            create_period({"budget": 10})


# ---------------------------------------------------------------------------
# TestUpdatePeriod
# ---------------------------------------------------------------------------


class TestUpdatePeriod:
    def test_zero_and_empty_values_apply(self, january_period: Period, now: datetime) -> None:
        later = now + timedelta(hours=1)
        updated = update_period(
            january_period.model_copy(update={"reflection": "went well"}),
            {"target_spend": 0, "reflection": ""},
            now=later,
        )
        assert updated.target_spend == 0.0
        assert updated.reflection == ""
        assert updated.updated_at == later

    def test_omitted_fields_are_untouched(self, january_period: Period) -> None:
        updated = update_period(january_period, PeriodUpdate(goals="Walk more"))
        assert updated.goals == "Walk more"
        assert updated.name == january_period.name
        assert updated.target_spend == january_period.target_spend
        assert updated.wallet_setup == january_period.wallet_setup

    def test_none_never_clears_closed_at(self, january_period: Period, now: datetime) -> None:
        closed = close_period(january_period, now=now)
        updated = update_period(closed, {"closed_at": None, "name": None})
        assert updated.closed_at == now
        assert updated.name == january_period.name

    def test_original_is_not_mutated(self, january_period: Period) -> None:
        update_period(january_period, {"name": "Renamed"})
        assert january_period.name == "Jan 1 - Jan 31, 2026"

    def test_updated_at_always_refreshes(self, january_period: Period, now: datetime) -> None:
        later = now + timedelta(days=1)
        assert update_period(january_period, {}, now=later).updated_at == later


# ---------------------------------------------------------------------------
# TestLifecycle
# ---------------------------------------------------------------------------


class TestLifecycle:
    def test_close_period_sets_closed_at(self, january_period: Period, now: datetime) -> None:
        closed = close_period(january_period, now=now)
        assert closed.closed_at == now
        assert closed.updated_at == now
        assert is_period_closed(closed) is True
        assert is_period_closed(january_period) is False

    def test_active_inside_window(self, january_period: Period, now: datetime) -> None:
        assert is_period_active(january_period, now=now) is True

    def test_inactive_before_and_after_window(self, january_period: Period) -> None:
        before = datetime(2025, 12, 31, tzinfo=timezone.utc)
        after = datetime(2026, 2, 1, tzinfo=timezone.utc)
        assert is_period_active(january_period, now=before) is False
        assert is_period_active(january_period, now=after) is False

    def test_closed_period_is_not_active(self, january_period: Period, now: datetime) -> None:
        closed = close_period(january_period, now=now)
        assert is_period_active(closed, now=now) is False

    def test_naive_datetimes_are_treated_as_utc(self, now: datetime) -> None:
        period = Period(start_at=datetime(2026, 1, 1), end_at=datetime(2026, 1, 31))
        assert is_period_active(period, now=now) is True


# ---------------------------------------------------------------------------
# TestValidatePeriod
# ---------------------------------------------------------------------------


class TestValidatePeriod:
    def test_valid_period(self, january_period: Period) -> None:
        assert validate_period(january_period) == []

    def test_field_errors(self, now: datetime) -> None:
        period = Period(start_at=now, end_at=now, target_spend=-1.0)
        assert validate_period(period) == [
            "Name is required",
            "Goals are required",
            "Target spend must be positive",
            "Start date must be before end date",
        ]

    def test_wallet_setup_errors_are_appended(self, january_period: Period) -> None:
        period = january_period.model_copy(
            update={
                "wallet_setup": [
                    WalletSetup(name="Food", spending_limit=100.0, is_default=False),
                ]
            }
        )
        assert validate_period(period) == ["Exactly one wallet must be marked as default"]

    def test_empty_wallet_setup_is_not_checked(self, january_period: Period) -> None:
        period = january_period.model_copy(update={"wallet_setup": []})
        assert validate_period(period) == []

    def test_created_period_without_targets_reports_default_wallet(self, now: datetime) -> None:
        period = create_period(
            {
                "name": "January",
                "goals": "Save",
                "start_at": datetime(2026, 1, 1),
                "end_at": datetime(2026, 1, 31),
            },
            now=now,
        )
        assert validate_period(period) == ["Wallet 1: Spending limit must be at least $0.01"]

    def test_require_valid_period_raises(self, now: datetime) -> None:
        period = Period(start_at=now, end_at=now)
        with pytest.raises(PeriodValidationError) as excinfo:
            require_valid_period(period)
        assert "Name is required" in excinfo.value.errors
        assert excinfo.value.code == "INVALID_PERIOD"

    def test_require_valid_period_passes(self, january_period: Period) -> None:
        require_valid_period(january_period)


class TestPeriodName:
    def test_name_from_range(self) -> None:
        assert generate_period_name(date(2026, 1, 1), date(2026, 1, 31)) == "Jan 1 - Jan 31, 2026"

    def test_name_across_years(self) -> None:
        assert (
            generate_period_name(datetime(2025, 12, 15), datetime(2026, 1, 14))
            == "Dec 15 - Jan 14, 2026"
        )
