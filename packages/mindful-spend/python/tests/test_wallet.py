# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""
Tests for wallet records and budget aggregation: available balance, usage,
over-limit detection, and period budget summaries.
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from mindful_spend.query import (
    build_period_budget,
    build_wallet_utilization,
    get_total_wallet_limits,
)
from mindful_spend.types import Period, Wallet, WalletSetup
from mindful_spend.wallet import (
    calculate_wallet_available,
    create_wallet,
    create_wallet_from_setup,
    create_wallets_for_period,
    get_wallet_usage_percentage,
    is_wallet_over_limit,
    update_wallet,
)


def _wallet(limit: float, balance: float) -> Wallet:
    return Wallet(name="Food", spending_limit=limit, current_balance=balance)


# ---------------------------------------------------------------------------
# TestBudgetFacts
# ---------------------------------------------------------------------------


class TestBudgetFacts:
    def test_available_is_limit_minus_balance(self) -> None:
        assert calculate_wallet_available(_wallet(100.0, 40.0)) == 60.0

    def test_available_never_negative(self) -> None:
        assert calculate_wallet_available(_wallet(100.0, 150.0)) == 0.0

    def test_usage_with_zero_limit_is_zero(self) -> None:
        assert get_wallet_usage_percentage(_wallet(0.0, 50.0)) == 0.0

    def test_usage_percentage(self) -> None:
        assert get_wallet_usage_percentage(_wallet(200.0, 50.0)) == pytest.approx(25.0)

    def test_usage_is_capped_at_100(self) -> None:
        assert get_wallet_usage_percentage(_wallet(100.0, 150.0)) == 100.0

    def test_balance_equal_to_limit_is_not_over(self) -> None:
        assert is_wallet_over_limit(_wallet(100.0, 100.0)) is False

    def test_balance_above_limit_is_over(self) -> None:
        assert is_wallet_over_limit(_wallet(100.0, 100.01)) is True


# ---------------------------------------------------------------------------
# TestWalletRecords
# ---------------------------------------------------------------------------


class TestWalletRecords:
    def test_create_wallet_starts_with_zero_balance(self, now: datetime) -> None:
        wallet = create_wallet(
            {"name": "Food", "spending_limit": 100.0, "current_balance": 75.0},
            now=now,
        )
        assert wallet.current_balance == 0.0
        assert wallet.created_at == now
        assert wallet.updated_at == now

    def test_create_wallet_from_setup(self, now: datetime) -> None:
        setup = WalletSetup(name="Food", spending_limit=400.0, is_default=True)
        wallet = create_wallet_from_setup(setup, "acct-001", "period-jan", now=now)
        assert wallet.account_id == "acct-001"
        assert wallet.period_id == "period-jan"
        assert wallet.name == "Food"
        assert wallet.spending_limit == 400.0
        assert wallet.current_balance == 0.0
        assert wallet.is_default is True

    def test_create_wallets_for_period_keeps_order(self, january_period: Period) -> None:
        wallets = create_wallets_for_period(january_period, "acct-001")
        assert [wallet.name for wallet in wallets] == ["Food", "Transport", "Fun"]
        assert all(wallet.period_id == "period-jan" for wallet in wallets)
        assert sum(wallet.is_default for wallet in wallets) == 1

    def test_update_wallet_applies_zero_values(self, now: datetime) -> None:
        wallet = _wallet(100.0, 40.0)
        updated = update_wallet(wallet, {"spending_limit": 0, "current_balance": 0}, now=now)
        assert updated.spending_limit == 0.0
        assert updated.current_balance == 0.0
        assert updated.updated_at == now
        assert wallet.spending_limit == 100.0

    def test_update_wallet_ignores_none(self, now: datetime) -> None:
        wallet = _wallet(100.0, 40.0)
        updated = update_wallet(wallet, {"name": None}, now=now)
        assert updated.name == "Food"


# ---------------------------------------------------------------------------
# TestPeriodBudget
# ---------------------------------------------------------------------------


class TestPeriodBudget:
    def test_total_limits_sum_wallet_setup(self, january_period: Period) -> None:
        assert get_total_wallet_limits(january_period) == pytest.approx(600.0)

    def test_total_limits_fall_back_to_target_spend(self, january_period: Period) -> None:
        period = january_period.model_copy(update={"wallet_setup": [], "target_spend": 750.0})
        assert get_total_wallet_limits(period) == 750.0

    def test_wallet_utilization_snapshot(self, january_wallets: list[Wallet]) -> None:
        utilization = build_wallet_utilization(january_wallets[1])
        assert utilization.wallet_id == "wallet-transport"
        assert utilization.available == 0.0
        assert utilization.usage_percent == 100.0
        assert utilization.over_limit is True

    def test_period_budget_summary(
        self, january_period: Period, january_wallets: list[Wallet]
    ) -> None:
        budget = build_period_budget(january_period, january_wallets)
        assert budget.period_id == "period-jan"
        assert budget.total_limit == pytest.approx(600.0)
        assert budget.total_spent == pytest.approx(280.0)
        assert budget.total_available == pytest.approx(350.0)
        assert budget.usage_percent == pytest.approx(280.0 / 600.0 * 100.0)
        assert budget.over_limit_wallets == ["Transport"]
        assert [w.name for w in budget.wallets] == ["Transport", "Food", "Fun"]

    def test_period_budget_with_zero_limit(self) -> None:
        period = Period(
            start_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
            end_at=datetime(2026, 1, 31, tzinfo=timezone.utc),
        )
        budget = build_period_budget(period, [])
        assert budget.total_limit == 0.0
        assert budget.usage_percent == 0.0
        assert budget.wallets == []
