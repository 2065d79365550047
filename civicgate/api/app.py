import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .error import ClientError, ServerError

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    if exc.base_error.details:
        error_dict["details"] = exc.base_error.details
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": exc.base_error.code, "message": "Internal server error"}
    logger.error(f"Server error: {exc.base_error.code} ({exc.base_error.message})")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


def create_app(ApplicationConfig) -> FastAPI:
    logging.basicConfig(level=ApplicationConfig.LOG_LEVEL)

    app = FastAPI(title="CivicGate API", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if ApplicationConfig.ENABLE_LOGGING_MIDDLEWARE:
        from civicgate.api.middleware.request_logging import RequestLoggingMiddleware

        app.add_middleware(RequestLoggingMiddleware)

    from civicgate.api.routes import (
        admin_session,
        billing,
        contributions,
        elected_officials,
        features,
        health,
        password_reset,
        superadmin,
    )

    prefix = ApplicationConfig.API_PREFIX
    app.include_router(health.router, tags=["Health"])
    app.include_router(features.router, prefix=prefix, tags=["Features"])
    app.include_router(admin_session.router, prefix=prefix, tags=["Admin Session"])
    app.include_router(elected_officials.router, prefix=prefix, tags=["Elected Officials"])
    app.include_router(password_reset.router, prefix=prefix, tags=["Password Reset"])
    app.include_router(contributions.router, prefix=prefix, tags=["Contributions"])
    app.include_router(billing.router, prefix=prefix, tags=["Billing"])
    app.include_router(superadmin.router, prefix=prefix, tags=["Superadmin"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)

    return app
