# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
plan_period.py

Demonstrates one period from setup to summary:
  1. Create a period with a wallet setup and validate it.
  2. Materialize its wallets.
  3. Expand recurring spends into the spends they produce this period.
  4. Apply those spends to wallet balances and print a budget summary.

Run with:  python examples/plan_period.py
(from the package directory with mindful-spend installed)
"""

import logging
from datetime import datetime

from mindful_spend import (
    RecurringSpend,
    WalletSetup,
    build_period_budget,
    create_period,
    create_wallets_for_period,
    generate_period_name,
    plan_recurring_spends,
    schedule_description,
    update_wallet,
    validate_period,
)

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s %(message)s")

# ─── Setup ────────────────────────────────────────────────────────────────────

start_at = datetime(2026, 1, 1)
end_at = datetime(2026, 1, 31, 23, 59)

period = create_period(
    {
        "name": generate_period_name(start_at, end_at),
        "goals": "Cook at home, walk to work",
        "target_spend": 650.0,
        "start_at": start_at,
        "end_at": end_at,
        "wallet_setup": [
            WalletSetup(name="Everyday", spending_limit=400.0, is_default=True),
            WalletSetup(name="Subscriptions", spending_limit=150.0),
            WalletSetup(name="Fun", spending_limit=100.0),
        ],
    }
)
period = period.model_copy(update={"id": "period-jan"})

errors = validate_period(period)
if errors:
    raise SystemExit("\n".join(errors))

wallets = create_wallets_for_period(period, account_id="acct-demo")
wallets = [
    wallet.model_copy(update={"id": f"wallet-{index}"})
    for index, wallet in enumerate(wallets, start=1)
]

# ─── Recurring spends ─────────────────────────────────────────────────────────

recurring_spends = [
    RecurringSpend(
        wallet_id="wallet-2",
        start_date=datetime(2025, 6, 1),
        description="Music streaming",
        amount=11.99,
        category="culture",
        schedule_frequency="monthly",
        day_of_month=31,
    ),
    RecurringSpend(
        wallet_id="wallet-1",
        start_date=datetime(2026, 1, 1),
        description="Weekly veg box",
        amount=24.0,
        schedule_frequency="weekly",
        day_of_week=2,
    ),
    RecurringSpend(
        wallet_id="wallet-from-december",
        start_date=datetime(2025, 12, 1),
        description="Climbing gym",
        amount=35.0,
        category="want",
        schedule_frequency="fortnightly",
        day_of_week=5,
    ),
]

for recurring in recurring_spends:
    print(f"{recurring.description:<16} {schedule_description(recurring)}")

spends = plan_recurring_spends(recurring_spends, period, wallets, account_id="acct-demo")

# ─── Apply spends to balances ─────────────────────────────────────────────────

by_id = {wallet.id: wallet for wallet in wallets}
for spend in spends:
    wallet = by_id[spend.wallet_id]
    by_id[spend.wallet_id] = update_wallet(
        wallet, {"current_balance": wallet.current_balance + spend.amount}
    )

budget = build_period_budget(period, list(by_id.values()))

print(f"\n── {period.name} ─────────────────────────────────")
print(f"  Allocated : ${budget.total_limit:.2f}")
print(f"  Spent     : ${budget.total_spent:.2f}")
print(f"  Available : ${budget.total_available:.2f}")
print(f"  Usage     : {budget.usage_percent:.1f}%")
for utilization in budget.wallets:
    flag = "  OVER" if utilization.over_limit else ""
    print(
        f"  {utilization.name:<14} ${utilization.spent:>7.2f} / ${utilization.limit:>7.2f}"
        f"  ({utilization.usage_percent:.0f}%){flag}"
    )

print(f"\n{len(spends)} spends planned:")
for spend in spends:
    print(f"  {spend.date.isoformat()}  ${spend.amount:>6.2f}  {spend.description}")
