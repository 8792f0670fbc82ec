# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations


class MindfulSpendError(Exception):
    """Base class for all mindful-spend errors."""

    def __init__(self, message: str, code: str = "MINDFUL_SPEND_ERROR") -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class InvalidFrequencyError(MindfulSpendError):
    """Raised when a recurring spend carries an unknown schedule frequency."""

    def __init__(self, value: str) -> None:
        from mindful_spend.types import SCHEDULE_FREQUENCY_VALUES

        super().__init__(
            f"'{value}' is not a valid schedule frequency. "
            f"Valid values: {sorted(SCHEDULE_FREQUENCY_VALUES)}.",
            code="INVALID_FREQUENCY",
        )
        self.value = value


class ValidationFailedError(MindfulSpendError):
    """
    Raised by the ``require_*`` helpers when validation reports errors.

    The plain ``validate_*`` functions never raise; use them when the
    messages are meant for display.

    Attributes:
        errors: The validation messages, in the order they were reported.
    """

    def __init__(
        self,
        errors: list[str],
        subject: str = "Record",
        code: str = "VALIDATION_FAILED",
    ) -> None:
        summary = "; ".join(errors)
        super().__init__(f"{subject} is invalid: {summary}", code=code)
        self.errors = list(errors)


class WalletSetupValidationError(ValidationFailedError):
    """Raised when a wallet setup collection fails validation."""

    def __init__(self, errors: list[str]) -> None:
        super().__init__(errors, subject="Wallet setup", code="INVALID_WALLET_SETUP")


class PeriodValidationError(ValidationFailedError):
    """Raised when a period fails validation."""

    def __init__(self, errors: list[str]) -> None:
        super().__init__(errors, subject="Period", code="INVALID_PERIOD")
