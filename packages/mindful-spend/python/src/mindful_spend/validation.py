# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""
Wallet validators.

Every ``validate_*`` function returns a list of human-readable messages and
an empty list when the input is valid. They never raise for bad values, so
callers can render the messages straight into a form.
"""
from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any

from mindful_spend.config import WalletRules
from mindful_spend.errors import WalletSetupValidationError
from mindful_spend.types import Wallet, WalletSetup

_DEFAULT_RULES = WalletRules()


def format_amount(value: float) -> str:
    """Format a currency bound with thousands separators and no trailing zeros."""
    text = f"{value:,.2f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def is_valid_number(value: Any) -> bool:
    """True for finite ints and floats. Booleans are not numbers here."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


# ─── Field validators ─────────────────────────────────────────────────────────


def validate_wallet_name(name: Any, rules: WalletRules | None = None) -> list[str]:
    """Check a wallet name is present and within the length bounds once trimmed."""
    rules = rules or _DEFAULT_RULES
    if not isinstance(name, str) or not name.strip():
        return ["Wallet name is required"]

    errors: list[str] = []
    trimmed = name.strip()
    if len(trimmed) < rules.name_min_length:
        noun = "character" if rules.name_min_length == 1 else "characters"
        errors.append(f"Wallet name must be at least {rules.name_min_length} {noun}")
    if len(trimmed) > rules.name_max_length:
        errors.append(
            f"Wallet name must be no more than {rules.name_max_length} characters"
        )
    return errors


def validate_spending_limit(limit: Any, rules: WalletRules | None = None) -> list[str]:
    """Check a spending limit is a finite number inside the configured range."""
    rules = rules or _DEFAULT_RULES
    if not is_valid_number(limit):
        return ["Spending limit must be a valid number"]

    errors: list[str] = []
    if limit < rules.spending_limit_min:
        errors.append(
            f"Spending limit must be at least ${format_amount(rules.spending_limit_min)}"
        )
    if limit > rules.spending_limit_max:
        errors.append(
            f"Spending limit cannot exceed ${format_amount(rules.spending_limit_max)}"
        )
    return errors


# ─── Collection validators ────────────────────────────────────────────────────


def validate_wallet_setup_uniqueness(wallets: Sequence[WalletSetup]) -> list[str]:
    """
    Report wallet names that collide once trimmed and lower-cased.

    Each duplicated name is listed once, in the spelling of its first
    occurrence, ordered by where that first occurrence sits.
    """
    first_spelling: dict[str, str] = {}
    counts: dict[str, int] = {}
    for wallet in wallets:
        trimmed = wallet.name.strip()
        key = trimmed.lower()
        first_spelling.setdefault(key, trimmed)
        counts[key] = counts.get(key, 0) + 1

    duplicates = [first_spelling[key] for key, count in counts.items() if count > 1]
    if not duplicates:
        return []
    return [f"Duplicate wallet names found: {', '.join(duplicates)}"]


def validate_default_wallet_count(wallets: Sequence[WalletSetup]) -> list[str]:
    """Exactly one wallet must be flagged as the default."""
    default_count = sum(1 for wallet in wallets if wallet.is_default)
    if default_count == 0:
        return ["Exactly one wallet must be marked as default"]
    if default_count > 1:
        return ["Only one wallet can be marked as default"]
    return []


def validate_wallet_count(
    wallets: Sequence[WalletSetup],
    rules: WalletRules | None = None,
) -> list[str]:
    """Check the number of wallets in a period setup."""
    rules = rules or _DEFAULT_RULES
    errors: list[str] = []
    if len(wallets) < rules.min_wallets_per_period:
        noun = "wallet is" if rules.min_wallets_per_period == 1 else "wallets are"
        errors.append(f"At least {rules.min_wallets_per_period} {noun} required")
    if len(wallets) > rules.max_wallets_per_period:
        errors.append(
            f"Maximum {rules.max_wallets_per_period} wallets allowed per period"
        )
    return errors


# ─── Composite validators ─────────────────────────────────────────────────────


def validate_single_wallet_setup(
    wallet: WalletSetup,
    rules: WalletRules | None = None,
) -> list[str]:
    """Validate the name and limit of one wallet allocation."""
    return [
        *validate_wallet_name(wallet.name, rules),
        *validate_spending_limit(wallet.spending_limit, rules),
    ]


def validate_single_wallet(wallet: Wallet, rules: WalletRules | None = None) -> list[str]:
    """Validate a materialized wallet, including its owner ids and balance."""
    errors: list[str] = []
    if not wallet.account_id:
        errors.append("Account ID is required")
    if not wallet.period_id:
        errors.append("Period ID is required")

    errors.extend(validate_wallet_name(wallet.name, rules))
    errors.extend(validate_spending_limit(wallet.spending_limit, rules))

    if not is_valid_number(wallet.current_balance):
        errors.append("Current balance must be a valid number")
    elif wallet.current_balance < 0:
        errors.append("Current balance cannot be negative")

    return errors


def validate_complete_wallet_setup(
    wallets: Sequence[WalletSetup],
    rules: WalletRules | None = None,
) -> list[str]:
    """
    Validate a period's whole wallet setup.

    Checks run in order: count, uniqueness, default count, then each wallet.
    An empty setup stops after the count check since nothing else can be
    said about it. Per-wallet messages are prefixed with the wallet's
    1-based position, e.g. ``"Wallet 2: Wallet name is required"``.
    """
    errors = validate_wallet_count(wallets, rules)
    if not wallets:
        return errors

    errors.extend(validate_wallet_setup_uniqueness(wallets))
    errors.extend(validate_default_wallet_count(wallets))

    for index, wallet in enumerate(wallets, start=1):
        for error in validate_single_wallet_setup(wallet, rules):
            errors.append(f"Wallet {index}: {error}")

    return errors


def require_valid_wallet_setup(
    wallets: Sequence[WalletSetup],
    rules: WalletRules | None = None,
) -> None:
    """
    Raise if ``wallets`` fails :func:`validate_complete_wallet_setup`.

    Raises:
        WalletSetupValidationError: Carrying every reported message.
    """
    errors = validate_complete_wallet_setup(wallets, rules)
    if errors:
        raise WalletSetupValidationError(errors)
