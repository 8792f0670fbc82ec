# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""
Period lifecycle.

A period has no explicit status. It moves from draft to active by the clock
(``start_at <= now <= end_at``) and to closed by :func:`close_period`.
There is no reopen operation.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any

from mindful_spend.config import DEFAULT_CONFIG, MindfulSpendConfig
from mindful_spend.dates import ensure_utc, utc_now
from mindful_spend.errors import PeriodValidationError
from mindful_spend.types import Period, PeriodDraft, PeriodUpdate, WalletSetup
from mindful_spend.validation import validate_complete_wallet_setup

logger = logging.getLogger("mindful_spend.period")


def create_period(
    data: PeriodDraft | Mapping[str, Any] | None = None,
    *,
    now: datetime | None = None,
    config: MindfulSpendConfig | None = None,
) -> Period:
    """
    Build a new Period, filling in defaults for anything not supplied.

    ``start_at`` and ``end_at`` default to ``now``; callers are expected to
    set a real range. A period created without a wallet setup gets a single
    default wallet sized to ``target_spend``.

    Args:
        data: Partial period fields.
        now: Timestamp used for defaults and bookkeeping. Defaults to the
            current UTC time.
        config: Supplies the default wallet name.

    Raises:
        pydantic.ValidationError: If ``data`` carries unknown fields or
            values of the wrong type.
    """
    config = config or DEFAULT_CONFIG
    draft = data if isinstance(data, PeriodDraft) else PeriodDraft.model_validate(dict(data or {}))
    fields = draft.provided()
    timestamp = now or utc_now()

    target_spend = fields.get("target_spend", 0.0)
    wallet_setup = fields.get("wallet_setup") or [
        WalletSetup(
            name=config.periods.default_wallet_name,
            spending_limit=target_spend,
            is_default=True,
        )
    ]

    return Period(
        name=fields.get("name", ""),
        goals=fields.get("goals", ""),
        target_spend=target_spend,
        target_savings=fields.get("target_savings", 0.0),
        start_at=fields.get("start_at", timestamp),
        end_at=fields.get("end_at", timestamp),
        reflection=fields.get("reflection", ""),
        wallet_setup=list(wallet_setup),
        created_at=timestamp,
        updated_at=timestamp,
    )


def update_period(
    period: Period,
    updates: PeriodUpdate | Mapping[str, Any],
    *,
    now: datetime | None = None,
) -> Period:
    """
    Return a copy of ``period`` with the provided fields applied.

    Only fields the caller explicitly set are applied, so ``target_spend=0``
    or ``reflection=""`` take effect while omitted fields stay untouched.
    A None value counts as omitted; in particular it never clears
    ``closed_at``. ``updated_at`` is always refreshed.
    """
    payload = updates if isinstance(updates, PeriodUpdate) else PeriodUpdate.model_validate(dict(updates))
    changes = payload.provided()
    changes["updated_at"] = now or utc_now()
    return period.model_copy(update=changes)


def close_period(period: Period, *, now: datetime | None = None) -> Period:
    """Mark a period closed as of ``now``."""
    timestamp = now or utc_now()
    logger.debug("period_closed", extra={"period_id": period.id, "closed_at": timestamp.isoformat()})
    return period.model_copy(update={"closed_at": timestamp, "updated_at": timestamp})


def is_period_closed(period: Period) -> bool:
    return period.closed_at is not None


def is_period_active(period: Period, *, now: datetime | None = None) -> bool:
    """True while the period is open and ``now`` lies inside its window."""
    if is_period_closed(period):
        return False
    reference = ensure_utc(now or utc_now())
    return ensure_utc(period.start_at) <= reference <= ensure_utc(period.end_at)


def validate_period(period: Period, config: MindfulSpendConfig | None = None) -> list[str]:
    """
    Collect field-level problems with a period.

    A non-empty wallet setup is checked in full as well, and its messages are
    appended after the period's own.
    """
    config = config or DEFAULT_CONFIG
    errors: list[str] = []

    if not period.name.strip():
        errors.append("Name is required")
    if not period.goals.strip():
        errors.append("Goals are required")
    if period.target_spend < 0:
        errors.append("Target spend must be positive")
    if ensure_utc(period.start_at) >= ensure_utc(period.end_at):
        errors.append("Start date must be before end date")

    if period.wallet_setup:
        errors.extend(validate_complete_wallet_setup(period.wallet_setup, config.wallets))

    return errors


def require_valid_period(period: Period, config: MindfulSpendConfig | None = None) -> None:
    """
    Raise if ``period`` fails :func:`validate_period`.

    Raises:
        PeriodValidationError: Carrying every reported message.
    """
    errors = validate_period(period, config)
    if errors:
        raise PeriodValidationError(errors)


def generate_period_name(start_at: date, end_at: date) -> str:
    """Name a period after its range, e.g. ``'Jan 1 - Jan 31, 2026'``."""
    return f"{start_at:%b} {start_at.day} - {end_at:%b} {end_at.day}, {end_at.year}"
