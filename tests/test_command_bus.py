from dataclasses import dataclass
from decimal import Decimal

import pytest

from loans_manager.application.commands import CreateLoanCommand, RepayLoanCommand
from loans_manager.application.common.command_bus import (
    CommandBus,
    CommandNotRegisteredError,
    CommandRoute,
)
from loans_manager.application.common.interfaces import (
    Command,
    CommandHandler,
    CommandValidator,
)
from loans_manager.application.common.validation import ValidationResult
from loans_manager.domain.value_objects.loan_id import LoanId


@dataclass(frozen=True)
class PingCommand(Command):
    payload: str


class RecordingValidator(CommandValidator[PingCommand]):
    def __init__(self):
        self.seen = []

    async def validate(self, command: PingCommand) -> ValidationResult:
        self.seen.append(command)
        if command.payload:
            return ValidationResult()
        return ValidationResult.single("payload", command.payload, "Empty", "Payload is empty.")


class RecordingHandler(CommandHandler[PingCommand]):
    def __init__(self):
        self.seen = []

    async def execute(self, command: PingCommand) -> None:
        self.seen.append(command)


@pytest.fixture()
def route():
    return CommandRoute(validator=RecordingValidator(), handler=RecordingHandler())


async def test_validate_dispatches_to_registered_validator(route):
    bus = CommandBus({PingCommand: route})

    result = await bus.validate(PingCommand(payload=""))

    assert result.codes == ["Empty"]
    assert route.validator.seen == [PingCommand(payload="")]
    assert route.handler.seen == []


async def test_submit_does_not_revalidate(route):
    bus = CommandBus({PingCommand: route})

    await bus.submit(PingCommand(payload=""))

    assert route.validator.seen == []
    assert route.handler.seen == [PingCommand(payload="")]


async def test_unregistered_command_fails_both_phases():
    bus = CommandBus({})

    with pytest.raises(CommandNotRegisteredError):
        await bus.validate(PingCommand(payload="x"))
    with pytest.raises(CommandNotRegisteredError):
        await bus.submit(PingCommand(payload="x"))


async def test_dispatch_uses_exact_type(route):
    @dataclass(frozen=True)
    class LoudPing(PingCommand):
        pass

    bus = CommandBus({PingCommand: route})

    with pytest.raises(CommandNotRegisteredError):
        await bus.validate(LoudPing(payload="x"))


async def test_create_then_get_round_trip(command_bus, loan_repository):
    loan_id = LoanId.generate()
    command = CreateLoanCommand(
        id=loan_id, borrower_id="bob", lender_id="alice", amount=Decimal("42.00")
    )

    assert (await command_bus.validate(command)).is_valid
    await command_bus.submit(command)

    loan = await loan_repository.get(loan_id)
    assert loan.borrower_id.value == "bob"
    assert loan.lender_id.value == "alice"
    assert loan.amount == Decimal("42.00")
    assert loan.is_repaid is False
    assert loan.repaid_at is None


async def test_invalid_create_is_not_stored_when_caller_checks(command_bus, loan_repository):
    command = CreateLoanCommand(
        id=LoanId.generate(), borrower_id="alice", lender_id="alice", amount=Decimal("1")
    )

    result = await command_bus.validate(command)
    if result.is_valid:
        await command_bus.submit(command)

    assert result.codes == ["BorrowerAndLenderMustDiffer"]
    assert len(loan_repository) == 0


async def test_repay_through_bus(command_bus, loan_repository):
    loan_id = LoanId.generate()
    await command_bus.submit(
        CreateLoanCommand(id=loan_id, borrower_id="bob", lender_id="carol", amount=Decimal("5"))
    )
    repay = RepayLoanCommand(loan_id=loan_id)

    assert (await command_bus.validate(repay)).is_valid
    await command_bus.submit(repay)

    assert (await loan_repository.get(loan_id)).is_repaid is True
    assert (await command_bus.validate(repay)).codes == ["LoanAlreadyRepaid"]
