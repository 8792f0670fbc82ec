# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
mindful-spend: budget periods, wallets and recurring spends.

Quick start::

    from datetime import datetime
    from mindful_spend import (
        RecurringSpend,
        WalletSetup,
        calculate_occurrences_in_period,
        create_period,
        validate_period,
    )

    period = create_period({
        "name": "January",
        "goals": "Cook at home",
        "start_at": datetime(2026, 1, 1),
        "end_at": datetime(2026, 1, 31, 23, 59),
        "wallet_setup": [WalletSetup(name="Food", spending_limit=400.0, is_default=True)],
    })
    assert validate_period(period) == []

    gym = RecurringSpend(start_date=datetime(2026, 1, 1), schedule_frequency="weekly", day_of_week=1)
    calculate_occurrences_in_period(gym, period.start_at, period.end_at)
    # [date(2026, 1, 5), date(2026, 1, 12), date(2026, 1, 19), date(2026, 1, 26)]
"""

from mindful_spend.config import (
    DEFAULT_CONFIG,
    MindfulSpendConfig,
    PeriodDefaults,
    SpendRules,
    WalletRules,
)
from mindful_spend.errors import (
    InvalidFrequencyError,
    MindfulSpendError,
    PeriodValidationError,
    ValidationFailedError,
    WalletSetupValidationError,
)
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
from mindful_spend.query import (
    build_period_budget,
    build_wallet_utilization,
    get_total_wallet_limits,
)
from mindful_spend.recurring import (
    create_recurring_spend,
    plan_recurring_spends,
    resolve_wallet_id,
    update_recurring_spend,
    validate_recurring_spend,
)
from mindful_spend.schedule import (
    calculate_occurrences_in_period,
    day_of_month_label,
    day_of_week_label,
    schedule_description,
)
from mindful_spend.spend import create_spend, update_spend, validate_category, validate_spend
from mindful_spend.types import (
    SCHEDULE_FREQUENCY_VALUES,
    SPEND_CATEGORY_VALUES,
    Period,
    PeriodBudget,
    PeriodDraft,
    PeriodUpdate,
    RecurringSpend,
    RecurringSpendUpdate,
    ScheduleFrequency,
    Spend,
    SpendCategory,
    SpendUpdate,
    Wallet,
    WalletSetup,
    WalletUpdate,
    WalletUtilization,
)
from mindful_spend.validation import (
    require_valid_wallet_setup,
    validate_complete_wallet_setup,
    validate_default_wallet_count,
    validate_single_wallet,
    validate_single_wallet_setup,
    validate_spending_limit,
    validate_wallet_count,
    validate_wallet_name,
    validate_wallet_setup_uniqueness,
)
from mindful_spend.wallet import (
    calculate_wallet_available,
    create_wallet,
    create_wallet_from_setup,
    create_wallets_for_period,
    get_wallet_usage_percentage,
    is_wallet_over_limit,
    update_wallet,
)

__all__ = [
    # Types
    "ScheduleFrequency",
    "SCHEDULE_FREQUENCY_VALUES",
    "SpendCategory",
    "SPEND_CATEGORY_VALUES",
    "Period",
    "PeriodDraft",
    "PeriodUpdate",
    "WalletSetup",
    "Wallet",
    "WalletUpdate",
    "RecurringSpend",
    "RecurringSpendUpdate",
    "Spend",
    "SpendUpdate",
    "WalletUtilization",
    "PeriodBudget",
    # Config
    "MindfulSpendConfig",
    "WalletRules",
    "SpendRules",
    "PeriodDefaults",
    "DEFAULT_CONFIG",
    # Errors
    "MindfulSpendError",
    "InvalidFrequencyError",
    "ValidationFailedError",
    "WalletSetupValidationError",
    "PeriodValidationError",
    # Schedule
    "calculate_occurrences_in_period",
    "day_of_week_label",
    "day_of_month_label",
    "schedule_description",
    # Wallet setup validation
    "validate_wallet_name",
    "validate_spending_limit",
    "validate_wallet_setup_uniqueness",
    "validate_default_wallet_count",
    "validate_wallet_count",
    "validate_single_wallet_setup",
    "validate_single_wallet",
    "validate_complete_wallet_setup",
    "require_valid_wallet_setup",
    # Wallets and budget facts
    "create_wallet",
    "create_wallet_from_setup",
    "create_wallets_for_period",
    "update_wallet",
    "calculate_wallet_available",
    "get_wallet_usage_percentage",
    "is_wallet_over_limit",
    "get_total_wallet_limits",
    "build_wallet_utilization",
    "build_period_budget",
    # Periods
    "create_period",
    "update_period",
    "close_period",
    "is_period_active",
    "is_period_closed",
    "validate_period",
    "require_valid_period",
    "generate_period_name",
    # Spends
    "create_spend",
    "update_spend",
    "validate_spend",
    "validate_category",
    "create_recurring_spend",
    "update_recurring_spend",
    "validate_recurring_spend",
    "resolve_wallet_id",
    "plan_recurring_spends",
]
