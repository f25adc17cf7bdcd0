"""
Seed Roles Use Case

Creates the built-in roles if they are missing. Safe to run on every start.
"""

import logging
from typing import List

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import DefaultRole, Role

logger = logging.getLogger(__name__)

DEFAULT_ROLES = [
    {"name": DefaultRole.admin.value, "description": "System administrator with full access", "is_default": True},
    {"name": DefaultRole.user.value, "description": "Regular user", "is_default": True},
    {"name": DefaultRole.editor.value, "description": "Content editor", "is_default": False},
    {"name": DefaultRole.viewer.value, "description": "Read-only access", "is_default": False},
]


class SeedRolesUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[List[str]]:
        """Returns the names of the roles that were created."""
        created = []
        async with self.uow:
            for role_data in DEFAULT_ROLES:
                if await self.uow.roles.get_by_name(role_data["name"]) is None:
                    await self.uow.roles.create(Role(**role_data))
                    created.append(role_data["name"])
            await self.uow.commit()

        for name in created:
            logger.info("Created role: %s", name)
        return Return.ok(created)
