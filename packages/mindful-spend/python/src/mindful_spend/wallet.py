# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from mindful_spend.dates import utc_now
from mindful_spend.types import Period, Wallet, WalletSetup, WalletUpdate


def create_wallet(data: Mapping[str, Any] | None = None, now: datetime | None = None) -> Wallet:
    """
    Build a new Wallet from caller-supplied fields.

    The balance always starts at zero regardless of what ``data`` carries;
    it is only ever moved by recording spends.
    """
    fields = dict(data or {})
    for managed in ("current_balance", "created_at", "updated_at"):
        fields.pop(managed, None)
    timestamp = now or utc_now()
    return Wallet(
        **fields,
        current_balance=0.0,
        created_at=timestamp,
        updated_at=timestamp,
    )


def create_wallet_from_setup(
    setup: WalletSetup,
    account_id: str,
    period_id: str,
    now: datetime | None = None,
) -> Wallet:
    """Materialize one wallet allocation for a period."""
    timestamp = now or utc_now()
    return Wallet(
        account_id=account_id,
        period_id=period_id,
        name=setup.name,
        spending_limit=setup.spending_limit,
        current_balance=0.0,
        is_default=setup.is_default,
        created_at=timestamp,
        updated_at=timestamp,
    )


def create_wallets_for_period(
    period: Period,
    account_id: str,
    period_id: str | None = None,
    now: datetime | None = None,
) -> list[Wallet]:
    """
    Materialize every wallet allocation carried by a period, in order.

    ``period_id`` defaults to the period's own id.
    """
    target_period_id = period_id if period_id is not None else (period.id or "")
    timestamp = now or utc_now()
    return [
        create_wallet_from_setup(setup, account_id, target_period_id, now=timestamp)
        for setup in period.wallet_setup
    ]


def update_wallet(
    wallet: Wallet,
    updates: WalletUpdate | Mapping[str, Any],
    now: datetime | None = None,
) -> Wallet:
    """
    Return a copy of ``wallet`` with the provided fields applied.

    A zero limit or zero balance is a real update and is applied.
    ``updated_at`` is always refreshed.
    """
    payload = updates if isinstance(updates, WalletUpdate) else WalletUpdate.model_validate(dict(updates))
    changes = payload.provided()
    changes["updated_at"] = now or utc_now()
    return wallet.model_copy(update=changes)


# ─── Budget facts ─────────────────────────────────────────────────────────────


def calculate_wallet_available(wallet: Wallet) -> float:
    """Remaining room in the wallet. Overspend shows as 0, never negative."""
    return max(0.0, wallet.spending_limit - wallet.current_balance)


def get_wallet_usage_percentage(wallet: Wallet) -> float:
    """Share of the limit already spent, capped at 100. A zero limit reads as 0."""
    if wallet.spending_limit == 0:
        return 0.0
    return min(100.0, (wallet.current_balance / wallet.spending_limit) * 100.0)


def is_wallet_over_limit(wallet: Wallet) -> bool:
    """True only when the balance is strictly above the limit."""
    return wallet.current_balance > wallet.spending_limit
