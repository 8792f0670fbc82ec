# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""Shared fixtures for mindful-spend tests."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime, timezone
from typing import Any

import pytest

from mindful_spend.types import Period, RecurringSpend, Wallet, WalletSetup

NOW = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    """A fixed clock reading in the middle of January 2026."""
    return NOW


@pytest.fixture
def make_recurring() -> Callable[..., RecurringSpend]:
    """Factory for recurring spends starting 2026-01-01, overridable per test."""

    def _make(**overrides: Any) -> RecurringSpend:
        fields: dict[str, Any] = {
            "id": "rs-001",
            "account_id": "acct-001",
            "wallet_id": "wallet-food",
            "start_date": date(2026, 1, 1),
            "description": "Gym membership",
            "amount": 100.0,
            "category": "need",
            "schedule_frequency": "monthly",
            "day_of_month": 1,
            "is_active": True,
            "created_at": NOW,
            "updated_at": NOW,
        }
        fields.update(overrides)
        return RecurringSpend(**fields)

    return _make


@pytest.fixture
def wallet_setup() -> list[WalletSetup]:
    """A valid three-wallet setup with 'Food' as default."""
    return [
        WalletSetup(name="Food", spending_limit=400.0, is_default=True),
        WalletSetup(name="Transport", spending_limit=150.0, is_default=False),
        WalletSetup(name="Fun", spending_limit=50.0, is_default=False),
    ]


@pytest.fixture
def january_period(wallet_setup: list[WalletSetup]) -> Period:
    """An open period covering January 2026 with the standard wallet setup."""
    return Period(
        id="period-jan",
        name="Jan 1 - Jan 31, 2026",
        goals="Cook at home more",
        target_spend=600.0,
        target_savings=200.0,
        start_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
        end_at=datetime(2026, 1, 31, 23, 59, 59, tzinfo=timezone.utc),
        wallet_setup=wallet_setup,
        created_at=NOW,
        updated_at=NOW,
    )


@pytest.fixture
def january_wallets() -> list[Wallet]:
    """Materialized January wallets with some spending recorded."""
    return [
        Wallet(
            id="wallet-food",
            account_id="acct-001",
            period_id="period-jan",
            name="Food",
            spending_limit=400.0,
            current_balance=100.0,
            is_default=True,
        ),
        Wallet(
            id="wallet-transport",
            account_id="acct-001",
            period_id="period-jan",
            name="Transport",
            spending_limit=150.0,
            current_balance=180.0,
        ),
        Wallet(
            id="wallet-fun",
            account_id="acct-001",
            period_id="period-jan",
            name="Fun",
            spending_limit=50.0,
            current_balance=0.0,
        ),
    ]
