from datetime import UTC, datetime, timedelta

from jose import ExpiredSignatureError, JWTError, jwt

from libs.result import Error, Result, Return
from src.app.services.token_service import TokenClaims, TokenService
from src.domain.entities import User

ALGORITHM = "HS256"


class JwtTokenService(TokenService):
    """HS256 session tokens signed with the process-wide secret"""

    def __init__(self, secret: str, lifetime: timedelta = timedelta(hours=3)):
        self.secret = secret
        self.lifetime = lifetime

    def issue(self, user: User) -> str:
        """
        Generate JWT access token

        Args:
            user: Authenticated user

        Returns:
            JWT token string carrying user_id, role_id, role and email
        """
        now = datetime.now(UTC)
        payload = {
            "user_id": str(user.id),
            "role_id": str(user.role_id) if user.role_id else None,
            "role": user.role,
            "email": user.email,
            "exp": now + self.lifetime,
            "iat": now,
        }
        return jwt.encode(payload, self.secret, algorithm=ALGORITHM)

    def verify(self, token: str) -> Result[TokenClaims]:
        """
        Verify and decode JWT token

        Args:
            token: JWT token string

        Returns:
            Result with decoded claims, or Error
        """
        try:
            jwt.get_unverified_header(token)
        except JWTError:
            return Return.err(
                Error("MALFORMED_TOKEN", "Invalid token format. Please login again.")
            )

        try:
            payload = jwt.decode(token, self.secret, algorithms=[ALGORITHM])
        except ExpiredSignatureError:
            return Return.err(Error("TOKEN_EXPIRED", "Token expired. Please login again."))
        except JWTError:
            return Return.err(Error("INVALID_TOKEN", "Invalid token"))

        if not payload.get("user_id") or not payload.get("role") or not payload.get("email"):
            return Return.err(Error("INVALID_TOKEN", "Invalid token"))

        return Return.ok(
            TokenClaims(
                user_id=payload["user_id"],
                role_id=payload.get("role_id"),
                role=payload["role"],
                email=payload["email"],
            )
        )
