"""User-facing validation messages, keyed by error code."""

LENDER_NOT_NULL_OR_EMPTY = "LenderNotNullOrEmpty"
BORROWER_NOT_NULL_OR_EMPTY = "BorrowerNotNullOrEmpty"
LENDER_DOES_NOT_EXIST = "LenderDoesNotExist"
BORROWER_DOES_NOT_EXIST = "BorrowerDoesNotExist"
BORROWER_AND_LENDER_MUST_DIFFER = "BorrowerAndLenderMustDiffer"
LOAN_DOES_NOT_EXIST = "LoanDoesNotExist"
LOAN_ALREADY_REPAID = "LoanAlreadyRepaid"

MESSAGES = {
    LENDER_NOT_NULL_OR_EMPTY: "Lender must be defined.",
    BORROWER_NOT_NULL_OR_EMPTY: "Borrower must be defined.",
    LENDER_DOES_NOT_EXIST: "Lender does not exist.",
    BORROWER_DOES_NOT_EXIST: "Borrower does not exist.",
    BORROWER_AND_LENDER_MUST_DIFFER: "Borrower and lender must differ.",
    LOAN_DOES_NOT_EXIST: "Loan with id {loan_id} does not exist.",
    LOAN_ALREADY_REPAID: "Loan with id {loan_id} is already repaid.",
}


def message_for(code: str, **params) -> str:
    return MESSAGES[code].format(**params)
