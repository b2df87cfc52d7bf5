"""Registration form controller - validation and submission lifecycle"""

import enum
import logging
from typing import Any, Dict, Mapping, Optional

from pydantic import ValidationError

from training_signup.models.registration import TrainingRegistration
from training_signup.schemas import RegistrationSubmission, submission_errors
from training_signup.services.registration_store import StoreError

logger = logging.getLogger(__name__)

SUBMISSION_ERROR_TITLE = "Erro ao enviar inscrição"
SUBMISSION_ERROR_MESSAGE = "Tente novamente mais tarde."

TEXT_FIELDS = (
    "full_name",
    "corporate_email",
    "department",
    "automation_level",
    "accessibility_description",
    "attendance_day",
    "notes",
)

TRUTHY_CHOICES = {"sim", "true", "on", "1", "yes"}


class FormState(str, enum.Enum):
    EDITING = "editing"
    SUBMITTING = "submitting"
    SUBMITTED = "submitted"


def blank_values() -> Dict[str, Any]:
    values: Dict[str, Any] = {field: "" for field in TEXT_FIELDS}
    values["needs_accessibility"] = False
    return values


def parse_choice_flag(value: Any) -> bool:
    """Interpret a yes/no radio value ("sim"/"nao") or a checkbox value"""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in TRUTHY_CHOICES


class RegistrationForm:
    """
    State of one registration form.

    Editing -> Submitting -> Submitted, falling back to Editing when
    validation fails (field errors) or the store rejects the create
    (notification). Entered values are kept until the submission succeeds.
    """

    def __init__(self, store):
        """
        Args:
            store: Anything with a ``create(RegistrationSubmission)`` method,
                normally a RegistrationStore
        """
        self.store = store
        self.state = FormState.EDITING
        self.values = blank_values()
        self.errors: Dict[str, str] = {}
        self.notification: Optional[str] = None
        self.registration: Optional[TrainingRegistration] = None

    @property
    def shows_accessibility_description(self) -> bool:
        return bool(self.values["needs_accessibility"])

    def update(self, data: Mapping[str, Any]) -> None:
        """Copy raw user input into the form"""
        for field in TEXT_FIELDS:
            if field in data:
                value = data.get(field)
                self.values[field] = "" if value is None else str(value)
        if "needs_accessibility" in data:
            self.set_accessibility(parse_choice_flag(data.get("needs_accessibility")))

    def set_accessibility(self, needs_accessibility: bool) -> None:
        # Typed description text survives toggling; it is dropped at validation
        self.values["needs_accessibility"] = needs_accessibility

    def validate(self) -> Optional[RegistrationSubmission]:
        """Validate current values, filling ``errors`` on failure"""
        try:
            submission = RegistrationSubmission.model_validate(self.values)
        except ValidationError as e:
            self.errors = submission_errors(e, self.values)
            logger.info(f"Registration form has invalid fields: {sorted(self.errors)}")
            return None

        self.errors = {}
        return submission

    def submit(self) -> bool:
        """
        Validate and create the registration.

        Returns:
            True when the store acknowledged the registration
        """
        if self.state != FormState.EDITING:
            logger.warning(f"Ignoring submit while form is {self.state.value}")
            return False

        self.notification = None
        submission = self.validate()
        if submission is None:
            return False

        self.state = FormState.SUBMITTING
        try:
            self.registration = self.store.create(submission)
        except StoreError as e:
            logger.error(f"Registration submission failed: {e}")
            self.notification = f"{SUBMISSION_ERROR_TITLE}. {SUBMISSION_ERROR_MESSAGE}"
            self.state = FormState.EDITING
            return False

        self.state = FormState.SUBMITTED
        self.values = blank_values()
        return True

    def start_new(self) -> None:
        """Leave the confirmation state with a fresh blank form"""
        self.state = FormState.EDITING
        self.values = blank_values()
        self.errors = {}
        self.notification = None
        self.registration = None
