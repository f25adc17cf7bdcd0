from libs.result import Error

TESTIMONIAL_NOT_FOUND = Error("TESTIMONIAL_NOT_FOUND", "Testimonial not found")
# A testimonial referencing a course that does not exist
INVALID_TRAINING = Error("INVALID_TRAINING", "Training course not found")
