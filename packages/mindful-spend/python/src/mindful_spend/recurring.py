# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""
Recurring spend records and their materialization plan.

:func:`plan_recurring_spends` turns the active recurring spends of an account
into the ordinary spends they produce inside one period. It only builds the
records; writing them is the persistence layer's job.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from datetime import datetime
from typing import Any

from mindful_spend.config import SpendRules
from mindful_spend.dates import utc_now
from mindful_spend.schedule import calculate_occurrences_in_period
from mindful_spend.spend import (
    create_spend,
    validate_amount,
    validate_category,
    validate_description,
)
from mindful_spend.types import Period, RecurringSpend, RecurringSpendUpdate, Spend, Wallet

logger = logging.getLogger("mindful_spend.recurring")


def create_recurring_spend(
    data: Mapping[str, Any] | None = None,
    now: datetime | None = None,
) -> RecurringSpend:
    """
    Build a new RecurringSpend.

    Defaults to an active monthly schedule on the 1st, starting today (UTC).

    Raises:
        pydantic.ValidationError: If a field has the wrong type, or the
            weekday / day of month is out of range.
    """
    timestamp = now or utc_now()
    fields = dict(data or {})
    for managed in ("created_at", "updated_at"):
        fields.pop(managed, None)
    fields.setdefault("start_date", timestamp.date())
    if fields.get("day_of_month") is None:
        fields["day_of_month"] = 1
    return RecurringSpend(**fields, created_at=timestamp, updated_at=timestamp)


def update_recurring_spend(
    recurring_spend: RecurringSpend,
    updates: RecurringSpendUpdate | Mapping[str, Any],
    now: datetime | None = None,
) -> RecurringSpend:
    """Return a copy of ``recurring_spend`` with the provided fields applied."""
    payload = (
        updates
        if isinstance(updates, RecurringSpendUpdate)
        else RecurringSpendUpdate.model_validate(dict(updates))
    )
    changes = payload.provided()
    changes["updated_at"] = now or utc_now()
    return recurring_spend.model_copy(update=changes)


def validate_recurring_spend(
    recurring_spend: RecurringSpend,
    rules: SpendRules | None = None,
) -> list[str]:
    """Collect every problem with a recurring spend definition."""
    errors: list[str] = []

    if not recurring_spend.wallet_id:
        errors.append("Wallet is required")

    errors.extend(validate_description(recurring_spend.description, rules))
    errors.extend(validate_amount(recurring_spend.amount, rules))
    errors.extend(validate_category(recurring_spend.category))

    frequency = recurring_spend.schedule_frequency
    if frequency in ("weekly", "fortnightly") and recurring_spend.day_of_week is None:
        errors.append("Day of week is required for weekly and fortnightly schedules")
    if frequency == "monthly" and recurring_spend.day_of_month is None:
        errors.append("Day of month is required for monthly schedules")

    return errors


def resolve_wallet_id(recurring_spend: RecurringSpend, wallets: Sequence[Wallet]) -> str:
    """
    Pick the wallet a recurring spend's occurrences are charged to.

    The recurring spend's own wallet wins when it belongs to ``wallets``;
    otherwise the period's default wallet is used, or ``''`` when the period
    has none.
    """
    known_ids = {wallet.id for wallet in wallets if wallet.id}
    if recurring_spend.wallet_id and recurring_spend.wallet_id in known_ids:
        return recurring_spend.wallet_id
    for wallet in wallets:
        if wallet.is_default and wallet.id:
            return wallet.id
    return ""


def plan_recurring_spends(
    recurring_spends: Iterable[RecurringSpend],
    period: Period,
    wallets: Sequence[Wallet],
    *,
    account_id: str,
    period_id: str | None = None,
    now: datetime | None = None,
) -> list[Spend]:
    """
    Build one Spend per occurrence of each active recurring spend.

    Args:
        recurring_spends: The account's recurring spend definitions.
            Inactive ones are skipped.
        period: Supplies the ``[start_at, end_at]`` window.
        wallets: The period's materialized wallets, used to resolve which
            wallet each spend lands in.
        account_id: Owner of the generated spends.
        period_id: Period the spends belong to. Defaults to ``period.id``.
        now: Creation timestamp for the generated spends.

    Returns:
        Spends grouped by recurring spend, each group in date order.
    """
    target_period_id = period_id if period_id is not None else (period.id or "")
    timestamp = now or utc_now()
    active = [recurring for recurring in recurring_spends if recurring.is_active]

    if active and not wallets:
        logger.warning(
            "recurring_plan_without_wallets",
            extra={"account_id": account_id, "period_id": target_period_id},
        )

    planned: list[Spend] = []
    for recurring in active:
        occurrences = calculate_occurrences_in_period(recurring, period.start_at, period.end_at)
        wallet_id = resolve_wallet_id(recurring, wallets)
        for occurrence in occurrences:
            planned.append(
                create_spend(
                    {
                        "account_id": account_id,
                        "period_id": target_period_id,
                        "wallet_id": wallet_id,
                        "date": occurrence,
                        "description": recurring.description,
                        "amount": recurring.amount,
                        "category": recurring.category,
                        "tags": list(recurring.tags),
                        "notes": "",
                    },
                    now=timestamp,
                )
            )

    logger.info(
        "recurring_spends_planned",
        extra={
            "account_id": account_id,
            "period_id": target_period_id,
            "recurring_spend_count": len(active),
            "generated_spend_count": len(planned),
        },
    )
    return planned
