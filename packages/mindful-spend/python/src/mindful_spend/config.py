# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field


class WalletRules(BaseModel, frozen=True):
    """
    Bounds applied by the wallet-setup validators.

    Attributes:
        name_min_length: Minimum wallet name length after trimming.
        name_max_length: Maximum wallet name length after trimming.
        spending_limit_min: Smallest allowed spending limit.
        spending_limit_max: Largest allowed spending limit.
        min_wallets_per_period: Fewest wallets a period may be set up with.
        max_wallets_per_period: Most wallets a period may be set up with.
    """

    name_min_length: Annotated[int, Field(ge=1)] = 1
    name_max_length: Annotated[int, Field(ge=1)] = 50
    spending_limit_min: Annotated[float, Field(ge=0)] = 0.01
    spending_limit_max: Annotated[float, Field(gt=0)] = 1_000_000
    min_wallets_per_period: Annotated[int, Field(ge=0)] = 1
    max_wallets_per_period: Annotated[int, Field(ge=1)] = 10


class SpendRules(BaseModel, frozen=True):
    """
    Bounds applied when validating spends and recurring spends.

    Attributes:
        description_min_length: Minimum description length.
        description_max_length: Maximum description length.
        amount_min: Smallest amount a spend may record.
        notes_max_length: Maximum length of free-form notes.
    """

    description_min_length: Annotated[int, Field(ge=0)] = 3
    description_max_length: Annotated[int, Field(gt=0)] = 100
    amount_min: Annotated[float, Field(ge=0)] = 0.01
    notes_max_length: Annotated[int, Field(gt=0)] = 500


class PeriodDefaults(BaseModel, frozen=True):
    """
    Defaults used when a period is created without a wallet setup.

    Attributes:
        default_wallet_name: Name of the single wallet created for a period
            that carries no wallet setup of its own.
    """

    default_wallet_name: Annotated[str, Field(min_length=1)] = "General"


class MindfulSpendConfig(BaseModel, frozen=True):
    """
    Top-level configuration bundle.

    All fields are optional. The defaults match the rules the mobile
    client enforces on its forms.

    Example::

        config = MindfulSpendConfig(
            wallets=WalletRules(max_wallets_per_period=5),
            periods=PeriodDefaults(default_wallet_name="Everyday"),
        )
        period = create_period({"target_spend": 800.0}, config=config)
    """

    wallets: WalletRules = Field(default_factory=WalletRules)
    spends: SpendRules = Field(default_factory=SpendRules)
    periods: PeriodDefaults = Field(default_factory=PeriodDefaults)


DEFAULT_CONFIG = MindfulSpendConfig()
