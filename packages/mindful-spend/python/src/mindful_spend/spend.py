# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from mindful_spend.config import SpendRules
from mindful_spend.dates import utc_now
from mindful_spend.types import SPEND_CATEGORY_VALUES, Spend, SpendUpdate
from mindful_spend.validation import format_amount, is_valid_number

_DEFAULT_RULES = SpendRules()


def create_spend(data: Mapping[str, Any] | None = None, now: datetime | None = None) -> Spend:
    """
    Build a new Spend. ``date`` defaults to today's date in UTC.

    Raises:
        pydantic.ValidationError: If a field has the wrong type or the
            category is unknown.
    """
    timestamp = now or utc_now()
    fields = dict(data or {})
    for managed in ("created_at", "updated_at"):
        fields.pop(managed, None)
    fields.setdefault("date", timestamp.date())
    return Spend(**fields, created_at=timestamp, updated_at=timestamp)


def update_spend(
    spend: Spend,
    updates: SpendUpdate | Mapping[str, Any],
    now: datetime | None = None,
) -> Spend:
    """Return a copy of ``spend`` with the provided fields applied."""
    payload = updates if isinstance(updates, SpendUpdate) else SpendUpdate.model_validate(dict(updates))
    changes = payload.provided()
    changes["updated_at"] = now or utc_now()
    return spend.model_copy(update=changes)


def validate_description(description: Any, rules: SpendRules | None = None) -> list[str]:
    rules = rules or _DEFAULT_RULES
    if not isinstance(description, str) or not description.strip():
        return ["Description is required"]
    errors: list[str] = []
    trimmed = description.strip()
    if len(trimmed) < rules.description_min_length:
        errors.append(
            f"Description must be at least {rules.description_min_length} characters"
        )
    if len(trimmed) > rules.description_max_length:
        errors.append(
            f"Description must be less than {rules.description_max_length} characters"
        )
    return errors


def validate_amount(amount: Any, rules: SpendRules | None = None) -> list[str]:
    rules = rules or _DEFAULT_RULES
    if not is_valid_number(amount):
        return ["Please enter a valid number"]
    if amount < rules.amount_min:
        return [f"Amount must be at least ${format_amount(rules.amount_min)}"]
    return []


def validate_category(category: Any) -> list[str]:
    """Check a category is one of the known spend categories."""
    if category not in SPEND_CATEGORY_VALUES:
        return [f"Category must be one of: {', '.join(sorted(SPEND_CATEGORY_VALUES))}"]
    return []


def validate_spend(spend: Spend, rules: SpendRules | None = None) -> list[str]:
    """Collect every problem with a spend record as display messages."""
    rules = rules or _DEFAULT_RULES
    errors: list[str] = []

    if not spend.account_id:
        errors.append("Account ID is required")
    if not spend.period_id:
        errors.append("Period ID is required")

    errors.extend(validate_description(spend.description, rules))
    errors.extend(validate_amount(spend.amount, rules))
    errors.extend(validate_category(spend.category))

    if len(spend.notes) > rules.notes_max_length:
        errors.append(f"Notes must be less than {rules.notes_max_length} characters")

    return errors
