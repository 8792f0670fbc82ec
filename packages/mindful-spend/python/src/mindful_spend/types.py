# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

from __future__ import annotations

import datetime as dt
from datetime import date, datetime
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mindful_spend.dates import utc_now

# ─── Enumerations ─────────────────────────────────────────────────────────────

ScheduleFrequency = Literal["weekly", "fortnightly", "monthly"]

SCHEDULE_FREQUENCY_VALUES = frozenset({"weekly", "fortnightly", "monthly"})

SpendCategory = Literal["need", "want", "culture", "unexpected"]

SPEND_CATEGORY_VALUES = frozenset({"need", "want", "culture", "unexpected"})


def _strip_time_of_day(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.date()
    return value


# ─── Wallets ──────────────────────────────────────────────────────────────────


class WalletSetup(BaseModel, frozen=True):
    """
    Design-time allocation of part of a period's budget to a named wallet.

    Bounds are not enforced here. The wallet-setup validators
    report them as messages instead of rejecting the record.
    """

    name: str
    spending_limit: float
    is_default: bool = False


class Wallet(BaseModel, frozen=True):
    """A wallet materialized for one period. Balance grows as spends land."""

    id: Optional[str] = None
    account_id: str = ""
    period_id: str = ""
    name: str = ""
    spending_limit: float = 0.0
    current_balance: float = 0.0
    is_default: bool = False
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


# ─── Periods ──────────────────────────────────────────────────────────────────


class Period(BaseModel, frozen=True):
    """
    A time-boxed budget window.

    There is no status field: a period is closed once ``closed_at`` is set
    and active while open and ``start_at <= now <= end_at``.
    """

    id: Optional[str] = None
    name: str = ""
    goals: str = ""
    target_spend: float = 0.0
    target_savings: float = 0.0
    start_at: datetime
    end_at: datetime
    closed_at: Optional[datetime] = None
    reflection: str = ""
    wallet_setup: list[WalletSetup] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


# ─── Spends ───────────────────────────────────────────────────────────────────


class Spend(BaseModel, frozen=True):
    """An ordinary spend recorded against a wallet inside a period."""

    id: Optional[str] = None
    account_id: str = ""
    period_id: str = ""
    wallet_id: str = ""
    date: dt.date
    category: SpendCategory = "need"
    amount: float = 0.0
    description: str = ""
    notes: str = ""
    tags: list[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @field_validator("date", mode="before")
    @classmethod
    def strip_time_of_day(cls, value: Any) -> Any:
        return _strip_time_of_day(value)


class RecurringSpend(BaseModel, frozen=True):
    """
    A subscription-like spend definition.

    ``day_of_week`` (0 = Sunday … 6 = Saturday) drives weekly and fortnightly
    schedules; ``day_of_month`` (1–31) drives monthly ones.
    """

    id: Optional[str] = None
    account_id: str = ""
    wallet_id: str = ""
    start_date: date
    description: str = ""
    amount: float = 0.0
    category: SpendCategory = "need"
    tags: list[str] = Field(default_factory=list)
    schedule_frequency: ScheduleFrequency = "monthly"
    day_of_week: Optional[int] = Field(default=None, ge=0, le=6)
    day_of_month: Optional[int] = Field(default=None, ge=1, le=31)
    is_active: bool = True
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @field_validator("start_date", mode="before")
    @classmethod
    def strip_time_of_day(cls, value: Any) -> Any:
        return _strip_time_of_day(value)


# ─── Partial inputs ───────────────────────────────────────────────────────────


class _PartialInput(BaseModel, frozen=True):
    """
    Base for all-optional payloads.

    A field counts as provided only when the caller set it explicitly to a
    value other than None, so ``0`` and ``""`` still apply.
    """

    model_config = ConfigDict(extra="forbid")

    def provided(self) -> dict[str, Any]:
        """Return the explicitly supplied, non-None fields."""
        return {
            name: getattr(self, name)
            for name in self.model_fields_set
            if getattr(self, name) is not None
        }


class PeriodDraft(_PartialInput):
    """Caller-supplied fields for a new period. Anything missing is defaulted."""

    name: Optional[str] = None
    goals: Optional[str] = None
    target_spend: Optional[float] = None
    target_savings: Optional[float] = None
    start_at: Optional[datetime] = None
    end_at: Optional[datetime] = None
    reflection: Optional[str] = None
    wallet_setup: Optional[list[WalletSetup]] = None


class PeriodUpdate(_PartialInput):
    """Fields of an existing period that may be changed."""

    name: Optional[str] = None
    goals: Optional[str] = None
    target_spend: Optional[float] = None
    target_savings: Optional[float] = None
    start_at: Optional[datetime] = None
    end_at: Optional[datetime] = None
    reflection: Optional[str] = None
    closed_at: Optional[datetime] = None
    wallet_setup: Optional[list[WalletSetup]] = None


class WalletUpdate(_PartialInput):
    """Fields of an existing wallet that may be changed."""

    name: Optional[str] = None
    spending_limit: Optional[float] = None
    current_balance: Optional[float] = None
    is_default: Optional[bool] = None


class SpendUpdate(_PartialInput):
    """Fields of an existing spend that may be changed."""

    wallet_id: Optional[str] = None
    date: Optional[dt.date] = None
    category: Optional[SpendCategory] = None
    amount: Optional[float] = None
    description: Optional[str] = None
    notes: Optional[str] = None
    tags: Optional[list[str]] = None

    @field_validator("date", mode="before")
    @classmethod
    def strip_time_of_day(cls, value: Any) -> Any:
        return _strip_time_of_day(value)


class RecurringSpendUpdate(_PartialInput):
    """Fields of an existing recurring spend that may be changed."""

    wallet_id: Optional[str] = None
    start_date: Optional[date] = None
    description: Optional[str] = None
    amount: Optional[float] = None
    category: Optional[SpendCategory] = None
    tags: Optional[list[str]] = None
    schedule_frequency: Optional[ScheduleFrequency] = None
    day_of_week: Optional[int] = Field(default=None, ge=0, le=6)
    day_of_month: Optional[int] = Field(default=None, ge=1, le=31)
    is_active: Optional[bool] = None

    @field_validator("start_date", mode="before")
    @classmethod
    def strip_time_of_day(cls, value: Any) -> Any:
        return _strip_time_of_day(value)


# ─── Utilization ──────────────────────────────────────────────────────────────


class WalletUtilization(BaseModel, frozen=True):
    """Point-in-time usage snapshot for one wallet."""

    wallet_id: Optional[str]
    name: str
    is_default: bool
    limit: float
    spent: float
    available: float
    usage_percent: float
    over_limit: bool


class PeriodBudget(BaseModel, frozen=True):
    """Point-in-time budget summary for a period and its wallets."""

    period_id: Optional[str]
    total_limit: float
    total_spent: float
    total_available: float
    usage_percent: float
    over_limit_wallets: list[str]
    wallets: list[WalletUtilization]
