from datetime import timedelta
from typing import Optional

from fastapi import Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import Settings
from libs.result import Error
from src.adapter.services.email_sender import LoggingEmailSender, SmtpEmailSender
from src.adapter.services.jwt_token_service import JwtTokenService
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.app.services.email_sender import EmailSender
from src.app.services.token_service import TokenClaims, TokenService


def _engine_options(config: Settings) -> dict:
    # SQLite uses a static/null pool that rejects sizing arguments
    if config.DB_URI.startswith("sqlite"):
        return {}
    return {"pool_size": config.DB_POOL_SIZE, "pool_timeout": config.DB_POOL_TIMEOUT}


def build_engine(config: Settings) -> AsyncEngine:
    return create_async_engine(config.DB_URI, echo=False, future=True, **_engine_options(config))


def build_session_factory(engine: AsyncEngine) -> sessionmaker:
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


security = HTTPBearer(auto_error=False)

AUTHENTICATION_REQUIRED = Error("UNAUTHORIZED", "Access denied. No token provided.")


async def get_unit_of_work(request: Request):
    async with request.app.state.session_factory() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_settings(request: Request) -> Settings:
    return request.app.state.config


def get_token_service(settings: Settings = Depends(get_settings)) -> TokenService:
    return JwtTokenService(
        settings.JWT_SECRET,
        lifetime=timedelta(minutes=settings.JWT_ACCESS_EXPIRATION_MINUTES),
    )


def get_email_sender(settings: Settings = Depends(get_settings)) -> EmailSender:
    if not settings.SMTP_HOST:
        return LoggingEmailSender()
    return SmtpEmailSender(
        host=settings.SMTP_HOST,
        port=settings.SMTP_PORT,
        username=settings.SMTP_USER,
        password=settings.SMTP_PASSWORD,
        from_address=settings.SMTP_FROM or settings.SMTP_USER,
        use_tls=settings.SMTP_USE_TLS,
        timeout=settings.SMTP_TIMEOUT,
    )


def _verify_credentials(
    credentials: HTTPAuthorizationCredentials, token_service: TokenService
) -> TokenClaims:
    result = token_service.verify(credentials.credentials)
    if result.is_err():
        error = result.error
        if error.code == "MALFORMED_TOKEN":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
    return result.value


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    token_service: TokenService = Depends(get_token_service),
) -> TokenClaims:
    """
    Dependency to extract and verify JWT token from Authorization header.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        Verified claims containing user_id, role_id, role and email

    Raises:
        ClientError: 401 if the header is missing, the token is expired or
            its signature is invalid; 400 if the token is malformed
    """
    if credentials is None:
        raise ClientError(AUTHENTICATION_REQUIRED, status_code=status.HTTP_401_UNAUTHORIZED)
    return _verify_credentials(credentials, token_service)


async def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    token_service: TokenService = Depends(get_token_service),
) -> Optional[TokenClaims]:
    """Like get_current_user, but anonymous requests pass through as None."""
    if credentials is None:
        return None
    result = token_service.verify(credentials.credentials)
    return result.value if result.is_ok() else None


def require_roles(*roles: str):
    """
    Build a dependency that admits only principals holding one of `roles`.

    With no roles given, any authenticated principal is admitted.
    """

    async def role_gate(current_user: TokenClaims = Depends(get_current_user)) -> TokenClaims:
        if roles and current_user.role not in roles:
            raise ClientError(
                Error("FORBIDDEN", "Access denied. Insufficient permissions."),
                status_code=status.HTTP_403_FORBIDDEN,
            )
        return current_user

    return role_gate
