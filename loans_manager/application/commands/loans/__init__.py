"""Loan commands."""

from .create_loan import CreateLoanCommand, CreateLoanHandler, CreateLoanValidator
from .repay_loan import RepayLoanCommand, RepayLoanHandler, RepayLoanValidator

__all__ = [
    "CreateLoanCommand",
    "CreateLoanHandler",
    "CreateLoanValidator",
    "RepayLoanCommand",
    "RepayLoanHandler",
    "RepayLoanValidator",
]
