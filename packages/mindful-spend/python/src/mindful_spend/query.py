# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

from __future__ import annotations

from collections.abc import Sequence

from mindful_spend.types import Period, PeriodBudget, Wallet, WalletUtilization
from mindful_spend.wallet import (
    calculate_wallet_available,
    get_wallet_usage_percentage,
    is_wallet_over_limit,
)


def get_total_wallet_limits(period: Period) -> float:
    """
    Total budget allocated to a period.

    Sums the wallet setup when the period carries one; a period without a
    setup falls back to its ``target_spend``.
    """
    if period.wallet_setup:
        return sum(wallet.spending_limit for wallet in period.wallet_setup)
    return period.target_spend


def build_wallet_utilization(wallet: Wallet) -> WalletUtilization:
    """Derive a point-in-time usage snapshot from a wallet."""
    return WalletUtilization(
        wallet_id=wallet.id,
        name=wallet.name,
        is_default=wallet.is_default,
        limit=wallet.spending_limit,
        spent=wallet.current_balance,
        available=calculate_wallet_available(wallet),
        usage_percent=get_wallet_usage_percentage(wallet),
        over_limit=is_wallet_over_limit(wallet),
    )


def build_period_budget(period: Period, wallets: Sequence[Wallet]) -> PeriodBudget:
    """
    Summarize a period's budget across its wallets.

    Per-wallet snapshots are sorted by usage descending (most constrained
    first). ``total_available`` is the sum of each wallet's available
    amount, so one wallet's overspend does not eat into another's room.
    """
    utilizations = sorted(
        (build_wallet_utilization(wallet) for wallet in wallets),
        key=lambda utilization: utilization.usage_percent,
        reverse=True,
    )
    total_limit = get_total_wallet_limits(period)
    total_spent = sum(wallet.current_balance for wallet in wallets)

    if total_limit == 0:
        usage_percent = 0.0
    else:
        usage_percent = min(100.0, (total_spent / total_limit) * 100.0)

    return PeriodBudget(
        period_id=period.id,
        total_limit=total_limit,
        total_spent=total_spent,
        total_available=sum(utilization.available for utilization in utilizations),
        usage_percent=usage_percent,
        over_limit_wallets=[u.name for u in utilizations if u.over_limit],
        wallets=utilizations,
    )
