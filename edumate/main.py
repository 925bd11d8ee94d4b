# edumate/main.py
import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from redis.exceptions import RedisError
from sqlalchemy.exc import SQLAlchemyError

from edumate.core.config import settings
from edumate.core.exceptions import APIError
from edumate.core.logging_config import configure_logging
from edumate.api.v1.endpoints import appointments, auth, health, teachers, verification
from edumate import init_db, models  # noqa

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.PROJECT_NAME)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)


@app.on_event("startup")
def on_startup():
    init_db()


# Message used when a request body / query fails validation on these paths
VALIDATION_MESSAGES = {
    "/api/teacher-register": "User not created",
    "/api/student-register": "User not created",
    "/api/appointments": "Appointment not created",
    "/api/my-appointments": "Student ID or Teacher ID is required",
    "/api/update-appointment-status": "Appointment ID and status are required",
}


def _error_body(message: str, error=None) -> dict:
    body = {"message": message}
    if error is not None:
        body["error"] = error
    return body


@app.exception_handler(APIError)
async def api_error_handler(request: Request, exc: APIError):
    return JSONResponse(
        status_code=exc.status_code,
        content=jsonable_encoder(_error_body(exc.detail, exc.error)),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    message = VALIDATION_MESSAGES.get(request.url.path, "Invalid request")
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder(_error_body(message, errors)),
    )


# Message used when the database or the code store fails on these paths
SERVER_ERROR_MESSAGES = {
    "/api/send-verification-code": "Error sending verification code",
    "/api/verify-code": "Error verifying code",
    "/api/teacher-register": "User not created",
    "/api/student-register": "User not created",
    "/api/teacher-login": "Login failed",
    "/api/student-login": "Login failed",
    "/api/profile": "Update failed",
    "/api/appointments": "Appointment not created",
    "/api/my-appointments": "Could not fetch appointments",
    "/api/update-appointment-status": "Could not update appointment status",
    "/api/teachers": "Error fetching teachers",
}
TEACHER_PROFILE_PREFIX = "/api/teacher-profile/"


def _server_error_message(path: str) -> str:
    if path.startswith(TEACHER_PROFILE_PREFIX):
        return "Error fetching teacher profile"
    return SERVER_ERROR_MESSAGES.get(path, "Internal server error")


# Echoes the error text unless EXPOSE_ERROR_DETAILS is off
def _backend_error_response(request: Request, exc: Exception, backend: str) -> JSONResponse:
    logger.error(f"{backend} error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    error = str(exc) if settings.EXPOSE_ERROR_DETAILS else None
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(_server_error_message(request.url.path), error),
    )


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    return _backend_error_response(request, exc, "Database")


@app.exception_handler(RedisError)
async def code_store_error_handler(request: Request, exc: RedisError):
    return _backend_error_response(request, exc, "Redis")


app.include_router(verification.router, prefix="/api")
app.include_router(auth.router, prefix="/api")
app.include_router(appointments.router, prefix="/api")
app.include_router(teachers.router, prefix="/api")
app.include_router(health.router, prefix="/health")


@app.get("/")
def root():
    return {"message": "Running"}
