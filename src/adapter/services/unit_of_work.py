from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.blog_repository import BlogRepository
from src.adapter.repositories.contact_repository import ContactRepository
from src.adapter.repositories.password_reset_token_repository import PasswordResetTokenRepository
from src.adapter.repositories.role_repository import RoleRepository
from src.adapter.repositories.testimonial_repository import TestimonialRepository
from src.adapter.repositories.training_repository import (
    TrainingRepository,
    TrainingSessionRepository,
)
from src.adapter.repositories.user_repository import UserRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.roles = RoleRepository(self.session)
        self.password_reset_tokens = PasswordResetTokenRepository(self.session)
        self.contacts = ContactRepository(self.session)
        self.blogs = BlogRepository(self.session)
        self.trainings = TrainingRepository(self.session)
        self.training_sessions = TrainingSessionRepository(self.session)
        self.testimonials = TestimonialRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
