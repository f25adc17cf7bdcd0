from abc import ABC, abstractmethod

from src.app.repositories.blog_repository import IBlogRepository
from src.app.repositories.contact_repository import IContactRepository
from src.app.repositories.password_reset_token_repository import IPasswordResetTokenRepository
from src.app.repositories.role_repository import IRoleRepository
from src.app.repositories.testimonial_repository import ITestimonialRepository
from src.app.repositories.training_repository import (
    ITrainingRepository,
    ITrainingSessionRepository,
)
from src.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    roles: IRoleRepository
    password_reset_tokens: IPasswordResetTokenRepository
    contacts: IContactRepository
    blogs: IBlogRepository
    trainings: ITrainingRepository
    training_sessions: ITrainingSessionRepository
    testimonials: ITestimonialRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
