from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel

from libs.result import Result
from src.domain.entities import User


class TokenClaims(BaseModel):
    """Identity asserted by a verified session token"""

    user_id: str
    role_id: Optional[str] = None
    role: str
    email: str


class TokenService(ABC):
    """
    Issues and verifies signed session tokens.

    verify() errors:
        - MALFORMED_TOKEN: not a decodable token
        - TOKEN_EXPIRED: signature valid but past expiry
        - INVALID_TOKEN: wrong signature or missing claims
    """

    @abstractmethod
    def issue(self, user: User) -> str:
        pass

    @abstractmethod
    def verify(self, token: str) -> Result[TokenClaims]:
        pass
