"""
Authentication Use Cases

All authentication-related business logic.
"""

from .register_use_case import RegisterUseCase
from .login_use_case import LoginUseCase
from .get_current_user_use_case import GetCurrentUserUseCase
from .update_profile_use_case import UpdateProfileUseCase
from .change_password_use_case import ChangePasswordUseCase
from .forgot_password_use_case import ForgotPasswordUseCase
from .reset_password_use_case import ResetPasswordUseCase
from .verify_reset_token_use_case import VerifyResetTokenUseCase
from .dtos import (
    RegisterCommand,
    UpdateProfileCommand,
    UserProfile,
    AuthResponse,
    ProfileResponse,
    MessageResponse,
    VerifyResetTokenResponse,
)

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "LoginUseCase",
    "GetCurrentUserUseCase",
    "UpdateProfileUseCase",
    "ChangePasswordUseCase",
    "ForgotPasswordUseCase",
    "ResetPasswordUseCase",
    "VerifyResetTokenUseCase",
    # DTOs - Commands
    "RegisterCommand",
    "UpdateProfileCommand",
    # DTOs - Responses
    "UserProfile",
    "AuthResponse",
    "ProfileResponse",
    "MessageResponse",
    "VerifyResetTokenResponse",
]
