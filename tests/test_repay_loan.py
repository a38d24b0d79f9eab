import pytest

from loans_manager.application.commands.loans import (
    RepayLoanCommand,
    RepayLoanHandler,
    RepayLoanValidator,
)
from loans_manager.domain.exceptions import DomainValidationError, EntityNotFoundError
from loans_manager.domain.value_objects.loan_id import LoanId

from tests.fakes import make_loan


@pytest.fixture()
def validator(loan_repository):
    return RepayLoanValidator(loan_repository)


@pytest.fixture()
def handler(loan_repository):
    return RepayLoanHandler(loan_repository)


@pytest.fixture()
def active_loan(loan_repository):
    return loan_repository.add(make_loan("alice", "bob"))


async def test_active_loan_can_be_repaid(validator, active_loan):
    result = await validator.validate(RepayLoanCommand(loan_id=active_loan.id))

    assert result.is_valid


async def test_missing_loan_is_rejected(validator):
    loan_id = LoanId.generate()

    result = await validator.validate(RepayLoanCommand(loan_id=loan_id))

    assert result.codes == ["LoanDoesNotExist"]
    assert result.errors[0].field == "loan_id"
    assert result.errors[0].message == f"Loan with id {loan_id.value} does not exist."


async def test_handler_marks_loan_repaid(handler, loan_repository, active_loan):
    await handler.execute(RepayLoanCommand(loan_id=active_loan.id))

    stored = await loan_repository.get(active_loan.id)
    assert stored.is_repaid is True
    assert stored.repaid_at is not None


async def test_second_repay_is_rejected_by_validation(validator, handler, active_loan):
    command = RepayLoanCommand(loan_id=active_loan.id)
    await handler.execute(command)

    result = await validator.validate(command)

    assert result.codes == ["LoanAlreadyRepaid"]


async def test_second_repay_without_validation_keeps_first_timestamp(
    handler, loan_repository, active_loan
):
    command = RepayLoanCommand(loan_id=active_loan.id)
    await handler.execute(command)
    first = (await loan_repository.get(active_loan.id)).repaid_at

    with pytest.raises(DomainValidationError):
        await handler.execute(command)

    assert (await loan_repository.get(active_loan.id)).repaid_at == first


async def test_handler_fails_on_missing_loan(handler):
    with pytest.raises(EntityNotFoundError):
        await handler.execute(RepayLoanCommand(loan_id=LoanId.generate()))


async def test_racing_repayments_keep_first_timestamp(loan_repository, active_loan):
    first = await loan_repository.get(active_loan.id)
    second = await loan_repository.get(active_loan.id)
    first.repay()
    second.repay()

    await loan_repository.update(first)
    with pytest.raises(DomainValidationError):
        await loan_repository.update(second)

    assert (await loan_repository.get(active_loan.id)).repaid_at == first.repaid_at
