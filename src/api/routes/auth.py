from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Request, status
from pydantic import BaseModel, EmailStr, Field

from config import Settings
from libs.result import Error
from src.api.error import ClientError, ServerError
from src.app.services.email_sender import EmailSender
from src.app.services.token_service import TokenClaims, TokenService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    AuthResponse,
    ChangePasswordUseCase,
    ForgotPasswordUseCase,
    GetCurrentUserUseCase,
    LoginUseCase,
    MessageResponse,
    ProfileResponse,
    RegisterCommand,
    RegisterUseCase,
    ResetPasswordUseCase,
    UpdateProfileCommand,
    UpdateProfileUseCase,
    VerifyResetTokenResponse,
    VerifyResetTokenUseCase,
)
from src.app.use_cases.contact import ContactResponse, SubmitContactCommand, SubmitContactUseCase
from src.domain.entities import ContactCategory
from src.depends import (
    get_current_user,
    get_email_sender,
    get_optional_user,
    get_settings,
    get_token_service,
    get_unit_of_work,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])

# Error code -> HTTP status for everything raised from the auth use cases
ERROR_STATUS = {
    "WEAK_PASSWORD": status.HTTP_400_BAD_REQUEST,
    "INVALID_ROLE": status.HTTP_400_BAD_REQUEST,
    "PASSWORD_MISMATCH": status.HTTP_400_BAD_REQUEST,
    "SAME_PASSWORD": status.HTTP_400_BAD_REQUEST,
    "INVALID_OR_EXPIRED_TOKEN": status.HTTP_400_BAD_REQUEST,
    "INVALID_CREDENTIALS": status.HTTP_401_UNAUTHORIZED,
    "INVALID_CURRENT_PASSWORD": status.HTTP_401_UNAUTHORIZED,
    "ACCOUNT_DEACTIVATED": status.HTTP_403_FORBIDDEN,
    "USER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "USER_ALREADY_EXISTS": status.HTTP_409_CONFLICT,
    "RATE_LIMITED": status.HTTP_429_TOO_MANY_REQUESTS,
}


def raise_for_error(error: Error):
    status_code = ERROR_STATUS.get(error.code)
    if status_code is None:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)


# Bcrypt only looks at the first 72 bytes of a password
PasswordField = Field(..., min_length=1, max_length=72)


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Field shape is checked here; the password strength policy is enforced
    by the use case so both API and admin flows share it.
    """

    name: str = Field(..., min_length=1, max_length=100)
    username: str = Field(..., min_length=3, max_length=30)
    email: EmailStr
    password: str = PasswordField
    role: Optional[str] = Field(None, description="Role name, defaults to 'user'")


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=AuthResponse)
async def register(
    request: RegisterRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_service: TokenService = Depends(get_token_service),
    email_sender: EmailSender = Depends(get_email_sender),
    settings: Settings = Depends(get_settings),
):
    """
    Register a new account and return a session token.

    Raises:
        - 400 Bad Request: Weak password or unknown role
        - 409 Conflict: Email or username already registered
    """
    command = RegisterCommand(
        name=request.name,
        username=request.username,
        email=request.email,
        password=request.password,
        role_name=request.role,
    )
    result = await RegisterUseCase(uow, token_service, email_sender, settings).execute(command)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = PasswordField


@router.post("/login", status_code=status.HTTP_200_OK, response_model=AuthResponse)
async def login(
    request: LoginRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_service: TokenService = Depends(get_token_service),
    settings: Settings = Depends(get_settings),
):
    """
    Raises:
        - 401 Unauthorized: Invalid credentials
        - 403 Forbidden: Account deactivated
    """
    result = await LoginUseCase(uow, token_service, settings).execute(
        request.email, request.password
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def logout(current_user: TokenClaims = Depends(get_current_user)):
    # Tokens are stateless and stay valid until they expire; clients drop them
    return MessageResponse(message="Logout successful")


@router.get("/me", status_code=status.HTTP_200_OK, response_model=ProfileResponse)
async def get_me(
    current_user: TokenClaims = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetCurrentUserUseCase(uow).execute(UUID(current_user.user_id))
    if result.is_err():
        raise_for_error(result.error)
    return result.value


class UpdateProfileRequest(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    username: Optional[str] = Field(None, min_length=3, max_length=30)
    email: Optional[EmailStr] = None


@router.put("/profile", status_code=status.HTTP_200_OK, response_model=ProfileResponse)
async def update_profile(
    request: UpdateProfileRequest,
    current_user: TokenClaims = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    command = UpdateProfileCommand(**request.model_dump())
    result = await UpdateProfileUseCase(uow).execute(UUID(current_user.user_id), command)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


class ChangePasswordRequest(BaseModel):
    current_password: str = PasswordField
    new_password: str = PasswordField
    confirm_password: str = PasswordField


@router.post("/change-password", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def change_password(
    request: ChangePasswordRequest,
    current_user: TokenClaims = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    email_sender: EmailSender = Depends(get_email_sender),
    settings: Settings = Depends(get_settings),
):
    """
    Raises:
        - 400 Bad Request: Mismatch, weak or unchanged password
        - 401 Unauthorized: Current password is wrong
        - 404 Not Found: Account no longer exists
    """
    result = await ChangePasswordUseCase(uow, email_sender, settings).execute(
        UUID(current_user.user_id),
        request.current_password,
        request.new_password,
        request.confirm_password,
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


class ForgotPasswordRequest(BaseModel):
    email: EmailStr


@router.post("/forgot-password", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def forgot_password(
    request: ForgotPasswordRequest,
    http_request: Request,
    uow: UnitOfWork = Depends(get_unit_of_work),
    email_sender: EmailSender = Depends(get_email_sender),
    settings: Settings = Depends(get_settings),
):
    """
    Request a reset link.

    The response is the same whether or not an account exists for the
    email.

    Raises:
        - 429 Too Many Requests: A reset link was sent within the last minutes
    """
    result = await ForgotPasswordUseCase(uow, email_sender, settings).execute(
        request.email,
        ip_address=http_request.client.host if http_request.client else None,
        user_agent=http_request.headers.get("user-agent"),
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


class ResetPasswordRequest(BaseModel):
    token: str = Field(..., min_length=1)
    new_password: str = PasswordField
    confirm_password: str = PasswordField


@router.post("/reset-password", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def reset_password(
    request: ResetPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    email_sender: EmailSender = Depends(get_email_sender),
    settings: Settings = Depends(get_settings),
):
    """
    Raises:
        - 400 Bad Request: Invalid, expired or already used token; weak,
          mismatched or unchanged password
    """
    result = await ResetPasswordUseCase(uow, email_sender, settings).execute(
        request.token, request.new_password, request.confirm_password
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/verify-reset-token/{token}",
    status_code=status.HTTP_200_OK,
    response_model=VerifyResetTokenResponse,
)
async def verify_reset_token(token: str, uow: UnitOfWork = Depends(get_unit_of_work)):
    result = await VerifyResetTokenUseCase(uow).execute(token)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


class ContactRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    subject: str = Field(..., min_length=1, max_length=200)
    message: str = Field(..., min_length=1, max_length=2000)
    phone: Optional[str] = Field(None, max_length=20)
    category: ContactCategory = ContactCategory.general


@router.post("/contact", status_code=status.HTTP_201_CREATED, response_model=ContactResponse)
async def submit_contact(
    request: ContactRequest,
    current_user: Optional[TokenClaims] = Depends(get_optional_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    email_sender: EmailSender = Depends(get_email_sender),
    settings: Settings = Depends(get_settings),
):
    """
    Store a contact form submission and notify the administrators.

    Raises:
        - 429 Too Many Requests: Same email submitted within the last minutes
    """
    command = SubmitContactCommand(
        **request.model_dump(),
        user_id=UUID(current_user.user_id) if current_user else None,
    )
    result = await SubmitContactUseCase(uow, email_sender, settings).execute(command)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
