"""Database models for Training Signup"""

from training_signup.models.choices import AttendanceDay, AutomationLevel, Department
from training_signup.models.registration import TrainingRegistration

__all__ = [
    "TrainingRegistration",
    "Department",
    "AutomationLevel",
    "AttendanceDay",
]
