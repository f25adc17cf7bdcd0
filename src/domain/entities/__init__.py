"""
Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    DefaultRole,
    ContactCategory,
    ContactStatus,
    ContactPriority,
    TrainingCategory,
    StudyMode,
    DurationUnit,
    SessionStatus,
)

# Export all entities
from .role import Role
from .user import User
from .password_reset_token import PasswordResetToken
from .contact import Contact
from .blog import Blog, slugify
from .training import Training, TrainingSession, training_code_prefix
from .testimonial import Testimonial

__all__ = [
    # Enums
    "DefaultRole",
    "ContactCategory",
    "ContactStatus",
    "ContactPriority",
    "TrainingCategory",
    "StudyMode",
    "DurationUnit",
    "SessionStatus",
    # Entities
    "Role",
    "User",
    "PasswordResetToken",
    "Contact",
    "Blog",
    "Training",
    "TrainingSession",
    "Testimonial",
    # Helpers
    "slugify",
    "training_code_prefix",
]
