# edumate/services/mailer.py
import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from edumate.core.config import settings

logger = logging.getLogger(__name__)


class MailDeliveryError(Exception):
    pass


VERIFICATION_TEXT = """Dear User,

Thank you for signing up!
Your verification code is: {code}

Please enter this code in the verification field to activate your account.
If you did not request this email, please ignore it.

Best regards,
Edumate Team
"""

VERIFICATION_HTML = """
<div style="font-family: Arial, sans-serif; line-height: 1.6; color: #555;">
  <div style="text-align: center; padding: 20px; background: linear-gradient(to right, #fbcffb 0%, #c4c3fc 50%, #c5b4ff 100%); border-radius: 12px;">
    <h1 style="color: #ffffff;">Welcome to Edumate!</h1>
  </div>
  <div style="padding: 20px;">
    <h2 style="color: #333;">Dear User,</h2>
    <p>Thank you for signing up!</p>
    <p>Your verification code is:</p>
    <p style="font-size: 28px; font-weight: bold; color: #E67AFA; text-align: center; border: 1px dashed #4CAF50; padding: 10px; margin: 20px 0;">{code}</p>
    <p>Please enter this code in the verification field to activate your account.</p>
    <p>If you did not request this email, please ignore it.</p>
    <br>
    <p>Best regards,</p>
    <p><strong>Edumate Team</strong></p>
  </div>
</div>
"""


def build_verification_message(to: str, code: str, from_addr: str) -> MIMEMultipart:
    msg = MIMEMultipart("alternative")
    msg["Subject"] = settings.MAIL_SUBJECT
    msg["From"] = from_addr
    msg["To"] = to
    msg.attach(MIMEText(VERIFICATION_TEXT.format(code=code), "plain", "utf-8"))
    msg.attach(MIMEText(VERIFICATION_HTML.format(code=code), "html", "utf-8"))
    return msg


class SMTPMailer:
    """
    Sends mail over SMTP with STARTTLS.

    Without SMTP credentials the mailer runs in log-only mode: the message
    is written to the log and treated as delivered.
    """

    def __init__(
        self,
        host: str,
        port: int,
        user: str | None = None,
        password: str | None = None,
        from_addr: str | None = None,
        timeout: float = 10.0,
    ):
        self.host = host
        self.port = port
        self.user = user
        self.password = password
        self.from_addr = from_addr or user or "no-reply@edumate.local"
        self.timeout = timeout

    @property
    def log_only(self) -> bool:
        return not self.user or not self.password

    def send_verification_code(self, to: str, code: str) -> None:
        msg = build_verification_message(to, code, self.from_addr)

        if self.log_only:
            logger.warning(
                f"SMTP credentials not configured, not sending mail to {to} "
                f"(subject={msg['Subject']!r}, code={code})"
            )
            return

        try:
            with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as server:
                server.starttls()
                server.login(self.user, self.password)
                server.sendmail(self.from_addr, [to], msg.as_string())
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"Error sending verification email to {to}: {e}")
            raise MailDeliveryError(str(e)) from e

        logger.info(f"Verification email sent to {to}")


def mailer_from_settings() -> SMTPMailer:
    return SMTPMailer(
        host=settings.SMTP_HOST,
        port=settings.SMTP_PORT,
        user=settings.SMTP_USER,
        password=settings.SMTP_PASSWORD,
        from_addr=settings.MAIL_FROM,
    )
