# edumate/core/security.py
from typing import Optional, Type, TypeVar

from passlib.context import CryptContext
from sqlalchemy.orm import Session

from edumate.core.config import settings

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)

AccountT = TypeVar("AccountT")


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, password_hash: str) -> bool:
    return pwd_context.verify(plain_password, password_hash)


def authenticate_user(
    db: Session,
    model: Type[AccountT],
    email: str,
    password: str,
) -> Optional[AccountT]:
    """
    Look up an account of `model` by email and check its password.

    Returns None both for an unknown email and for a wrong password. For an
    unknown email a dummy hash check still runs so both failures cost the
    same.
    """
    user = db.query(model).filter(model.email == email).first()
    if user is None:
        pwd_context.dummy_verify()
        return None
    if not verify_password(password, user.password_hash):
        return None
    return user
