from libs.result import Error

TRAINING_NOT_FOUND = Error("TRAINING_NOT_FOUND", "Training course not found")
SESSION_NOT_FOUND = Error("SESSION_NOT_FOUND", "Session not found")
DUPLICATE_TRAINING = Error(
    "TRAINING_ALREADY_EXISTS", "A training course with this title already exists"
)
INVALID_TITLE = Error("INVALID_TITLE", "Title must contain letters or digits")
INVALID_SESSION_DATES = Error("INVALID_SESSION_DATES", "End date must be after start date")
SESSION_OVERLAP = Error("SESSION_OVERLAP", "Session dates overlap with an existing session")
INVALID_SEATS = Error("INVALID_SEATS", "Booked seats cannot exceed total seats")
