# edumate/schemas/auth.py
from pydantic import BaseModel, field_validator
from pydantic_core import PydanticCustomError
from pydantic.networks import validate_email


def normalize_login_email(value: str) -> str:
    """
    Normalize like EmailStr does at registration, but keep malformed input
    as-is so it fails the lookup instead of failing validation.
    """
    try:
        return validate_email(value)[1]
    except PydanticCustomError:
        return value


class LoginRequest(BaseModel):
    # any string: a malformed email must fail like an unknown one
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        return normalize_login_email(value)


class MessageResponse(BaseModel):
    message: str


# Fixed messages shared by the login / profile endpoints
LOGIN_OK = "Login successful"
LOGIN_FAILED = "Wrong email or password"
UPDATE_OK = "Update successful"
UPDATE_BAD_PASSWORD = "Incorrect password"
