"""
PasswordResetToken Entity

Ledger of issued password reset tokens.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class PasswordResetToken(SQLModel, table=True):
    """
    PasswordResetToken entity - one row per issued reset token.

    Business Rules:
    - Expires 15 minutes after issuance
    - Token is stored as the SHA-256 hash of a random hex string
    - Single-use: marked as used together with the password update
    - Rate limited: one outstanding token per user per 5 minutes
    - Rows are never deleted; expiry is checked on verification
    """

    __tablename__ = "password_reset_tokens"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(foreign_key="users.id", index=True)
    token_hash: str = Field(max_length=64)  # SHA-256 output

    used: bool = Field(default=False)

    ip_address: Optional[str] = Field(default=None, max_length=64)
    user_agent: Optional[str] = Field(default=None, max_length=512)

    expires_at: datetime = Field(sa_column=Column(DateTime))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_password_reset_token_hash", "token_hash"),
        Index("idx_password_reset_user_created", "user_id", "created_at"),
    )
