"""
Domain Enums

Enumeration types used across domain entities.
"""

from enum import Enum


class DefaultRole(str, Enum):
    """Roles seeded at startup"""

    admin = "admin"
    user = "user"
    editor = "editor"
    viewer = "viewer"


class ContactCategory(str, Enum):
    general = "general"
    support = "support"
    feedback = "feedback"
    complaint = "complaint"
    partnership = "partnership"
    other = "other"


class ContactStatus(str, Enum):
    pending = "pending"
    read = "read"
    replied = "replied"
    resolved = "resolved"
    spam = "spam"


class ContactPriority(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"
    urgent = "urgent"


class TrainingCategory(str, Enum):
    safety = "safety"
    health = "health"
    first_aid = "first-aid"
    construction = "construction"
    fire_safety = "fire-safety"
    chemical = "chemical"
    general = "general"
    environmental = "environmental"
    management = "management"
    technical = "technical"


class StudyMode(str, Enum):
    full_time = "full-time"
    part_time = "part-time"
    distance_learning = "distance-learning"
    online = "online"
    on_site = "on-site"


class DurationUnit(str, Enum):
    days = "days"
    weeks = "weeks"
    months = "months"


class SessionStatus(str, Enum):
    """Lifecycle of a scheduled training session"""

    scheduled = "scheduled"
    ongoing = "ongoing"
    completed = "completed"
    cancelled = "cancelled"
