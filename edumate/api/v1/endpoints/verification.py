# edumate/api/v1/endpoints/verification.py
from fastapi import APIRouter, Depends, status

from edumate.core.exceptions import APIError, ServerError
from edumate.schemas.auth import MessageResponse
from edumate.schemas.verification import SendCodeRequest, VerifyCodeRequest
from edumate.services.mailer import MailDeliveryError
from edumate.services.verification_service import (
    InvalidCodeError,
    VerificationLedger,
    get_verification_ledger,
)

router = APIRouter(tags=["verification"])


@router.post("/send-verification-code", response_model=MessageResponse)
def send_verification_code(
    payload: SendCodeRequest,
    ledger: VerificationLedger = Depends(get_verification_ledger),
):
    """
    Phase 1 of registration: mail a fresh 4-digit code, replacing any
    earlier one for this email.
    """
    try:
        ledger.request_code(payload.email)
    except MailDeliveryError as e:
        raise ServerError("Error sending email", error=str(e))
    return MessageResponse(message="Verification code sent")


@router.post("/verify-code", response_model=MessageResponse)
def verify_code(
    payload: VerifyCodeRequest,
    ledger: VerificationLedger = Depends(get_verification_ledger),
):
    try:
        ledger.verify_code(payload.email, payload.code)
    except InvalidCodeError:
        raise APIError("Invalid code", status_code=status.HTTP_400_BAD_REQUEST)
    return MessageResponse(message="Code verified")
