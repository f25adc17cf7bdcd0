"""
Contact Use Cases
"""

from .submit_contact_use_case import SubmitContactUseCase, SubmitContactCommand, ContactResponse

__all__ = [
    "SubmitContactUseCase",
    "SubmitContactCommand",
    "ContactResponse",
]
