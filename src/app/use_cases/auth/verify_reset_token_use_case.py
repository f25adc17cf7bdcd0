from datetime import datetime
from typing import Callable

from libs.result import Result, Return
from src.app.services.reset_token_ledger import ResetTokenLedger
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from .dtos import VerifyResetTokenResponse


class VerifyResetTokenUseCase:
    """Check a reset token without consuming it."""

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(self, token: str) -> Result[VerifyResetTokenResponse]:
        async with self.uow:
            verified = await ResetTokenLedger(self.uow, clock=self.clock).verify(token)
            if verified.is_err():
                return Return.err(verified.error)

            return Return.ok(VerifyResetTokenResponse(valid=True, message="Token is valid"))
