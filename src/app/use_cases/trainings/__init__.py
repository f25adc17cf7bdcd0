"""
Training Use Cases

Course catalogue and session scheduling.
"""

from .create_training_use_case import CreateTrainingUseCase
from .list_trainings_use_case import ListTrainingsUseCase
from .list_featured_trainings_use_case import ListFeaturedTrainingsUseCase
from .list_upcoming_trainings_use_case import ListUpcomingTrainingsUseCase
from .list_training_categories_use_case import ListTrainingCategoriesUseCase
from .get_training_use_case import GetTrainingUseCase, GetTrainingByCodeUseCase
from .update_training_use_case import UpdateTrainingUseCase
from .delete_training_use_case import DeleteTrainingUseCase
from .list_training_sessions_use_case import ListTrainingSessionsUseCase
from .add_training_session_use_case import AddTrainingSessionUseCase
from .update_training_session_use_case import UpdateTrainingSessionUseCase
from .delete_training_session_use_case import DeleteTrainingSessionUseCase
from .dtos import (
    CreateTrainingCommand,
    UpdateTrainingCommand,
    CreateSessionCommand,
    UpdateSessionCommand,
    TrainingEnvelope,
    TrainingListResponse,
    TrainingCategoriesResponse,
    TrainingSessionsResponse,
    SessionCreatedResponse,
    SessionDeletedResponse,
)

__all__ = [
    "CreateTrainingUseCase",
    "ListTrainingsUseCase",
    "ListFeaturedTrainingsUseCase",
    "ListUpcomingTrainingsUseCase",
    "ListTrainingCategoriesUseCase",
    "GetTrainingUseCase",
    "GetTrainingByCodeUseCase",
    "UpdateTrainingUseCase",
    "DeleteTrainingUseCase",
    "ListTrainingSessionsUseCase",
    "AddTrainingSessionUseCase",
    "UpdateTrainingSessionUseCase",
    "DeleteTrainingSessionUseCase",
    "CreateTrainingCommand",
    "UpdateTrainingCommand",
    "CreateSessionCommand",
    "UpdateSessionCommand",
    "TrainingEnvelope",
    "TrainingListResponse",
    "TrainingCategoriesResponse",
    "TrainingSessionsResponse",
    "SessionCreatedResponse",
    "SessionDeletedResponse",
]
