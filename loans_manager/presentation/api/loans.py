"""
Loans API Router - FastAPI endpoints for loan management.

- Receives the CommandBus, LoansService and ApiSettings via Dishka
- Thin layer: only handles HTTP concerns (request/response, status codes)
- Writes go validate() → submit() through the CommandBus
- Reads go straight to LoansService, after the page-size check

Flow:
  HTTP Request → Router → Command → CommandBus → Handler → Repository
                                 ↓
  HTTP Response ← Router ← ValidationResult
"""

from decimal import Decimal
from logging import getLogger
from typing import Annotated, Optional
from uuid import UUID

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, HTTPException, Path, Query, Response, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from loans_manager.application.commands import CreateLoanCommand, RepayLoanCommand
from loans_manager.application.common.command_bus import CommandBus
from loans_manager.application.common.validation import ValidationResult
from loans_manager.application.dto.loan import LoanDTO, ValidationResultDTO
from loans_manager.application.services.loans_service import LoansService
from loans_manager.config.settings import ApiSettings
from loans_manager.domain.value_objects.loan_id import LoanId
from loans_manager.domain.value_objects.user_id import UserId

logger = getLogger(__name__)

MAX_NUMBER_OF_RECORD_TO_GET_EXCEEDED = "MaxNumberOfRecordToGetExceeded"


# ==================== REQUEST/RESPONSE MODELS ====================


class CreateLoanRequest(BaseModel):
    """Request body for creating a loan. The id is generated when omitted."""

    id: Optional[UUID] = None
    borrower_id: Optional[str] = None
    lender_id: Optional[str] = None
    # Fits the numeric(18, 2) column
    amount: Decimal = Field(gt=0, max_digits=18, decimal_places=2)


class CreateLoanResponse(BaseModel):
    id: str
    borrower_id: Optional[str]
    lender_id: Optional[str]
    amount: Decimal


class RepayLoanRequest(BaseModel):
    loan_id: UUID


class RepayLoanResponse(BaseModel):
    loan_id: str


# ==================== HELPERS ====================


def _bad_request(result: ValidationResult) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ValidationResultDTO.from_result(result).model_dump(mode="json"),
    )


def _page_too_large(take: int, settings: ApiSettings) -> Optional[JSONResponse]:
    """400 response when take is over the configured maximum, else None."""
    maximum = settings.max_number_of_record_to_get
    if take <= maximum:
        return None
    return _bad_request(
        ValidationResult.single(
            "take",
            take,
            MAX_NUMBER_OF_RECORD_TO_GET_EXCEEDED,
            f"Max number of records to get is {maximum}.",
        )
    )


def _not_found_if_empty(items: list, what: str) -> list:
    if not items:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=f"No {what} found."
        )
    return items


# ==================== ROUTER ====================

router = APIRouter(prefix="/api/loans", tags=["loans"])


# ==================== READ ENDPOINTS ====================


@router.get("", response_model=list[LoanDTO])
@inject
async def list_loans(
    service: FromDishka[LoansService],
    settings: FromDishka[ApiSettings],
    offset: int = Query(0, ge=0),
    take: Optional[int] = Query(None, ge=1),
):
    """Page through all loans."""
    take = settings.take_or_default(take)
    if rejected := _page_too_large(take, settings):
        return rejected

    loans = await service.get_page(offset, take)
    _not_found_if_empty(loans, "loans")
    return [LoanDTO.from_entity(loan) for loan in loans]


@router.get("/Borrowers", response_model=list[str])
@inject
async def list_borrowers(
    service: FromDishka[LoansService],
    settings: FromDishka[ApiSettings],
    offset: int = Query(0, ge=0),
    take: Optional[int] = Query(None, ge=1),
):
    """Distinct ids of users that have borrowed."""
    take = settings.take_or_default(take)
    if rejected := _page_too_large(take, settings):
        return rejected

    return _not_found_if_empty(await service.get_borrowers(offset, take), "borrowers")


@router.get("/Lenders", response_model=list[str])
@inject
async def list_lenders(
    service: FromDishka[LoansService],
    settings: FromDishka[ApiSettings],
    offset: int = Query(0, ge=0),
    take: Optional[int] = Query(None, ge=1),
):
    """Distinct ids of users that have lent."""
    take = settings.take_or_default(take)
    if rejected := _page_too_large(take, settings):
        return rejected

    return _not_found_if_empty(await service.get_lenders(offset, take), "lenders")


@router.get("/users/{user_id}", response_model=list[LoanDTO])
@inject
async def list_user_loans(
    user_id: Annotated[str, Path(pattern=r"\S")],
    service: FromDishka[LoansService],
    settings: FromDishka[ApiSettings],
    offset: int = Query(0, ge=0),
    take: Optional[int] = Query(None, ge=1),
):
    """Loans where the user is the borrower."""
    take = settings.take_or_default(take)
    if rejected := _page_too_large(take, settings):
        return rejected

    loans = await service.get_user_loans(UserId(user_id), offset, take)
    _not_found_if_empty(loans, f"loans for user {user_id}")
    return [LoanDTO.from_entity(loan) for loan in loans]


@router.get("/lenders/{user_id}", response_model=list[LoanDTO])
@inject
async def list_lender_loans(
    user_id: Annotated[str, Path(pattern=r"\S")],
    service: FromDishka[LoansService],
    settings: FromDishka[ApiSettings],
    offset: int = Query(0, ge=0),
    take: Optional[int] = Query(None, ge=1),
):
    """Loans where the user is the lender."""
    take = settings.take_or_default(take)
    if rejected := _page_too_large(take, settings):
        return rejected

    loans = await service.get_lender_loans(UserId(user_id), offset, take)
    _not_found_if_empty(loans, f"loans lent by user {user_id}")
    return [LoanDTO.from_entity(loan) for loan in loans]


@router.get("/{loan_id}", response_model=LoanDTO)
@inject
async def get_loan(loan_id: UUID, service: FromDishka[LoansService]):
    loan = await service.get(LoanId(str(loan_id)))
    if loan is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Loan with id {loan_id} does not exist.",
        )
    return LoanDTO.from_entity(loan)


# ==================== WRITE ENDPOINTS ====================


@router.post(
    "",
    response_model=CreateLoanResponse,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def create_loan(
    request: CreateLoanRequest,
    response: Response,
    bus: FromDishka[CommandBus],
):
    """
    Create a loan.

    The id is fixed here, before validation, and the same command object is
    submitted so the stored loan keeps it.
    """
    loan_id = LoanId(str(request.id)) if request.id else LoanId.generate()
    command = CreateLoanCommand(
        id=loan_id,
        borrower_id=request.borrower_id,
        lender_id=request.lender_id,
        amount=request.amount,
    )

    result = await bus.validate(command)
    if not result.is_valid:
        return _bad_request(result)

    await bus.submit(command)

    response.headers["Location"] = f"{router.prefix}/{loan_id.value}"
    return CreateLoanResponse(
        id=loan_id.value,
        borrower_id=command.borrower_id,
        lender_id=command.lender_id,
        amount=command.amount,
    )


@router.patch(
    "/Repay",
    response_model=RepayLoanResponse,
    status_code=status.HTTP_202_ACCEPTED,
)
@inject
async def repay_loan(request: RepayLoanRequest, bus: FromDishka[CommandBus]):
    """Mark a loan as repaid."""
    command = RepayLoanCommand(loan_id=LoanId(str(request.loan_id)))

    result = await bus.validate(command)
    if not result.is_valid:
        return _bad_request(result)

    await bus.submit(command)
    return RepayLoanResponse(loan_id=command.loan_id.value)
