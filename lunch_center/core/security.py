import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from fastapi.responses import JSONResponse
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from lunch_center.core.config import Settings
from lunch_center.core.exceptions import LunchCenterError
from lunch_center.core.messages import (
    FREE_TEXT_REQUIRED_MESSAGE,
    INTERNAL_ERROR_MESSAGE,
    INVALID_REQUEST_MESSAGE,
    LOCATION_REQUIRED_MESSAGE,
)

logger = logging.getLogger(__name__)

# 라우터 데코레이터와 app.state가 같은 인스턴스를 공유한다.
# 앱마다 다른 on/off 설정은 limiter.enabled 대신 rate_limit_exempt로 판단한다.
limiter: Limiter = Limiter(key_func=get_remote_address)


def rate_limit_exempt(request: Request) -> bool:
    """요청을 받은 앱의 RATE_LIMIT_ENABLED가 꺼져 있으면 제한하지 않는다."""
    return not request.app.state.settings.RATE_LIMIT_ENABLED


FIELD_MESSAGES = {
    "locationKeyword": LOCATION_REQUIRED_MESSAGE,
    "freeText": FREE_TEXT_REQUIRED_MESSAGE,
}


def setup_middlewares(app: FastAPI, settings: Settings) -> None:
    """Register common middlewares (CORS, trusted host, security headers, rate limiter handlers)."""
    # rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # trusted hosts
    allowed_hosts = settings.ALLOWED_HOSTS
    if settings.ENVIRONMENT == "production":
        allowed_hosts = [
            host for host in settings.ALLOWED_HOSTS
            if host not in ["localhost", "127.0.0.1", "0.0.0.0"]
        ]
    app.add_middleware(TrustedHostMiddleware, allowed_hosts=allowed_hosts)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_allowed_origins(),
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    # security headers
    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers[
            "Strict-Transport-Security"
        ] = "max-age=31536000; includeSubDomains"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        return response


def setup_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """Register global exception handlers. Every error body is {"error": <message>}."""

    @app.exception_handler(LunchCenterError)
    async def lunch_center_error_handler(request: Request, exc: LunchCenterError):
        if exc.status_code >= 500:
            logger.error("[ERROR] %s %s -> %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        message = INVALID_REQUEST_MESSAGE
        for error in exc.errors():
            field = error.get("loc", ())[-1:]
            if field and field[0] in FIELD_MESSAGES:
                message = FIELD_MESSAGES[field[0]]
                break
        return JSONResponse(status_code=400, content={"error": message})

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.exception("[ERROR] unhandled error on %s %s", request.method, request.url.path)
        if settings.ENVIRONMENT == "production":
            return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR_MESSAGE})
        return JSONResponse(
            status_code=500,
            content={"error": str(exc) or INTERNAL_ERROR_MESSAGE},
        )
