from pydantic import BaseModel


class PasswordResetMailRequest(BaseModel):
    recipient: str
    otp: str


class PasswordResetMailResponse(BaseModel):
    status: str = "sent"
