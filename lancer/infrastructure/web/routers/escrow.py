"""
Escrow router.
Confirms settled payments into escrow and refunds escrowed funds.
"""

from typing import Annotated, Any, Dict

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from lancer.application.dto.escrow_dto import ConfirmEscrowPaymentRequest, RefundEscrowRequest
from lancer.application.use_cases.base_use_case import UseCaseResult
from lancer.application.use_cases.escrow_use_cases import (
    ConfirmEscrowPaymentUseCase,
    RefundEscrowUseCase,
)
from lancer.infrastructure.mappers.transaction_mapper import TransactionMapper
from lancer.infrastructure.web.dependencies import (
    get_confirm_escrow_use_case,
    get_json_body,
    get_refund_escrow_use_case,
)


router = APIRouter()
mapper = TransactionMapper()


def _error(message: str) -> JSONResponse:
    # Escrow callers get a 400 for every failure, provider outages included
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


def _failure(result: UseCaseResult) -> JSONResponse:
    return _error(result.error or "Request failed")


@router.post("/confirm-escrow-payment")
async def confirm_escrow_payment(
    body: Annotated[Dict[str, Any], Depends(get_json_body)],
    use_case: Annotated[ConfirmEscrowPaymentUseCase, Depends(get_confirm_escrow_use_case)]
):
    """
    Move a transaction into escrow after its payment succeeded.

    - **paymentIntentId**: Stripe PaymentIntent id of the checkout
    """
    try:
        request = ConfirmEscrowPaymentRequest.model_validate(body)
    except PydanticValidationError:
        return _error("paymentIntentId must be a string")

    result = await use_case.execute(request)
    if not result.success:
        return _failure(result)

    return JSONResponse(content=mapper.domain_to_row(result.data))


@router.post("/refund-escrow")
async def refund_escrow(
    body: Annotated[Dict[str, Any], Depends(get_json_body)],
    use_case: Annotated[RefundEscrowUseCase, Depends(get_refund_escrow_use_case)]
):
    """
    Refund an escrowed transaction to the client.

    - **transactionId**: Transaction held in escrow
    """
    try:
        request = RefundEscrowRequest.model_validate(body)
    except PydanticValidationError:
        return _error("transactionId must be a string")

    result = await use_case.execute(request)
    if not result.success:
        return _failure(result)

    return JSONResponse(content={
        "transaction": mapper.domain_to_row(result.data["transaction"]),
        "refund": result.data["refund"].to_dict(),
    })
