# edumate/services/verification_service.py
from __future__ import annotations

import logging
import secrets
from functools import lru_cache
from typing import Optional, Protocol

from edumate.core.config import settings
from edumate.services.mailer import mailer_from_settings
from edumate.services.verification_store import (
    MemoryCodeStore,
    RedisCodeStore,
    get_redis_connection,
)

logger = logging.getLogger(__name__)


class InvalidCodeError(Exception):
    pass


class CodeStore(Protocol):
    def set_code(self, email: str, code: str, ttl_seconds: Optional[int] = None) -> None: ...
    def get_code(self, email: str) -> Optional[str]: ...
    def delete_code(self, email: str) -> None: ...
    def consume_code(self, email: str, code: str) -> bool: ...
    def mark_verified(self, email: str, ttl_seconds: Optional[int] = None) -> None: ...
    def is_verified(self, email: str) -> bool: ...
    def clear_verified(self, email: str) -> None: ...


class Mailer(Protocol):
    def send_verification_code(self, to: str, code: str) -> None: ...


def generate_code() -> str:
    """4-digit code, uniform over 1000..9999."""
    return str(1000 + secrets.randbelow(9000))


class VerificationLedger:
    """
    Single-use email verification codes.

    One outstanding code per email; requesting again replaces it. A correct
    code is consumed on verification, a wrong one leaves the stored code
    usable for another attempt.
    """

    def __init__(
        self,
        store: CodeStore,
        mailer: Mailer,
        *,
        code_ttl_seconds: Optional[int] = None,
        verified_ttl_seconds: Optional[int] = None,
    ):
        self.store = store
        self.mailer = mailer
        self.code_ttl_seconds = code_ttl_seconds
        self.verified_ttl_seconds = verified_ttl_seconds

    def request_code(self, email: str) -> str:
        """
        Issue a new code for `email` and mail it.

        Raises MailDeliveryError if the transport rejects the message; the
        stored code is kept in that case.
        """
        code = generate_code()
        self.store.set_code(email, code, self.code_ttl_seconds)
        self.mailer.send_verification_code(email, code)
        logger.info(f"Verification code issued for {email}")
        return code

    def verify_code(self, email: str, code: str) -> None:
        if not self.store.consume_code(email, code):
            logger.info(f"Rejected verification code for {email}")
            raise InvalidCodeError("Invalid code")

        self.store.mark_verified(email, self.verified_ttl_seconds)
        logger.info(f"Email verified: {email}")

    def is_verified(self, email: str) -> bool:
        return self.store.is_verified(email)

    def consume_verified(self, email: str) -> None:
        self.store.clear_verified(email)


def build_store(backend: str) -> CodeStore:
    backend = backend.lower().strip()
    if backend == "memory":
        return MemoryCodeStore()
    if backend == "redis":
        return RedisCodeStore(get_redis_connection(settings.REDIS_URL))
    raise ValueError(f"Unknown VERIFICATION_BACKEND: {backend!r}")


@lru_cache
def get_verification_ledger() -> VerificationLedger:
    """FastAPI dependency; one ledger per process."""
    return VerificationLedger(
        build_store(settings.VERIFICATION_BACKEND),
        mailer_from_settings(),
        code_ttl_seconds=settings.VERIFICATION_CODE_TTL_SECONDS,
        verified_ttl_seconds=settings.VERIFIED_EMAIL_TTL_SECONDS,
    )
