from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlmodel import SQLModel

from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.use_cases.roles import SeedRolesUseCase
from src.depends import build_engine, build_session_factory
from .error import ClientError, ServerError
from .middleware.request_logging import RequestLoggingMiddleware
import logging

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    logger.warning(f"Client error: {exc.base_error.code} ({exc.base_error.message})")
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


async def handle_server_error(request: Request, exc: ServerError):
    logger.error(f"Server error: {exc.base_error.code} ({exc.base_error.message})")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=exc.to_payload()
    )


async def handle_validation_error(request: Request, exc: RequestValidationError):
    messages = []
    for err in exc.errors():
        field = ".".join(str(part) for part in err["loc"] if part != "body")
        messages.append(f"{field}: {err['msg']}" if field else err["msg"])
    logger.warning(f"Validation error on {request.url.path}: {messages}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Validation failed",
                "messages": messages,
            }
        },
    )


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": {"code": "INTERNAL_ERROR", "message": "Internal server error"}},
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = app.state.engine
    if app.state.config.AUTO_CREATE_TABLES:
        async with engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

    async with app.state.session_factory() as session:
        result = await SeedRolesUseCase(SqlAlchemyUnitOfWork(session)).execute()
        if result.value:
            logger.info(f"Seeded roles: {', '.join(result.value)}")

    yield

    await engine.dispose()


def create_app(ApplicationConfig) -> FastAPI:
    app = FastAPI(title=ApplicationConfig.APP_NAME, version="0.1.0", lifespan=lifespan)
    app.state.config = ApplicationConfig
    app.state.engine = build_engine(ApplicationConfig)
    app.state.session_factory = build_session_factory(app.state.engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    if ApplicationConfig.ENABLE_LOGGING_MIDDLEWARE:
        app.add_middleware(RequestLoggingMiddleware)

    from src.api.routes import (
        auth,
        blogs,
        health_check,
        roles,
        testimonials,
        trainings,
        users,
    )

    prefix = ApplicationConfig.API_PREFIX
    app.include_router(health_check.router, tags=["Health"])
    app.include_router(auth.router, prefix=prefix, tags=["Authentication"])
    app.include_router(users.router, prefix=prefix, tags=["Users"])
    app.include_router(roles.router, prefix=prefix, tags=["Roles"])
    app.include_router(blogs.router, prefix=prefix, tags=["Blogs"])
    app.include_router(trainings.router, prefix=prefix, tags=["Trainings"])
    app.include_router(testimonials.router, prefix=prefix, tags=["Testimonials"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    return app
