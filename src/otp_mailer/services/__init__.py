from .password_reset_mailer import PasswordResetMailer, send_mail

__all__ = ["PasswordResetMailer", "send_mail"]
