from fastapi import APIRouter, Depends, HTTPException

from ..deps import get_mailer
from ..domain.mail import DeliveryFailed
from ..ports.email import PasswordResetSender
from ..schemas.mail import PasswordResetMailRequest, PasswordResetMailResponse

router = APIRouter(prefix="/api/v1/mail", tags=["mail"])


@router.post("/password-reset", response_model=PasswordResetMailResponse, status_code=202)
async def send_password_reset(
    req: PasswordResetMailRequest,
    mailer: PasswordResetSender = Depends(get_mailer),
):
    result = await mailer.deliver(req.recipient, req.otp)
    if isinstance(result, DeliveryFailed):
        # the cause is already logged by the mailer; keep it out of the response
        raise HTTPException(status_code=502, detail="failed to send password reset email")
    return PasswordResetMailResponse()
