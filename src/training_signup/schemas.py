"""Submission schema and field-level validation messages"""

from typing import Any, Dict, Mapping, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from training_signup.models.choices import AttendanceDay, AutomationLevel, Department

MAX_EMAIL_LENGTH = 255

# Shown when a required value is missing or blank
REQUIRED_MESSAGES = {
    "full_name": "Nome completo é obrigatório",
    "corporate_email": "E-mail é obrigatório",
    "department": "Departamento é obrigatório",
    "automation_level": "Nível de familiaridade é obrigatório",
    "attendance_day": "Dia de participação é obrigatório",
}

# Shown when a value is present but not acceptable
INVALID_MESSAGES = {
    "full_name": "Nome completo deve ter no máximo 100 caracteres",
    "corporate_email": "E-mail inválido",
    "department": "Departamento inválido",
    "automation_level": "Nível de familiaridade inválido",
    "needs_accessibility": "Informe se precisa de acessibilidade",
    "accessibility_description": "Descrição de acessibilidade inválida",
    "attendance_day": "Dia de participação inválido",
    "notes": "Observações devem ter no máximo 1000 caracteres",
}


class RegistrationSubmission(BaseModel):
    """Validated payload for creating a training registration"""

    model_config = ConfigDict(str_strip_whitespace=True)

    full_name: str = Field(..., min_length=1, max_length=100)
    corporate_email: EmailStr = Field(..., description="Corporate e-mail address")
    department: Department
    automation_level: AutomationLevel
    needs_accessibility: bool = Field(False)
    accessibility_description: Optional[str] = Field(None)
    attendance_day: AttendanceDay
    notes: Optional[str] = Field(None, max_length=1000)

    @field_validator("corporate_email", mode="before")
    @classmethod
    def _check_email_length(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip()
            if len(value) > MAX_EMAIL_LENGTH:
                raise ValueError(f"must be at most {MAX_EMAIL_LENGTH} characters")
        return value

    @field_validator("accessibility_description", "notes", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @model_validator(mode="after")
    def _drop_description_without_accessibility(self) -> "RegistrationSubmission":
        # The description only means something when accessibility was requested
        if not self.needs_accessibility:
            self.accessibility_description = None
        return self

    def to_record_fields(self) -> Dict[str, Any]:
        """Column values for a new TrainingRegistration row"""
        return self.model_dump(mode="json")


def submission_errors(
    error: ValidationError, raw_values: Mapping[str, Any]
) -> Dict[str, str]:
    """
    Map a pydantic ValidationError to one message per form field.

    Args:
        error: The validation error raised for the submission
        raw_values: The values the user entered, used to tell "missing"
            apart from "invalid"

    Returns:
        Dictionary of field name -> user-facing message
    """
    messages: Dict[str, str] = {}
    for detail in error.errors():
        loc = detail.get("loc") or ()
        field = str(loc[0]) if loc else "__all__"
        if field in messages:
            continue

        raw_value = raw_values.get(field)
        is_blank = raw_value is None or (
            isinstance(raw_value, str) and not raw_value.strip()
        )
        if is_blank and field in REQUIRED_MESSAGES:
            messages[field] = REQUIRED_MESSAGES[field]
        else:
            messages[field] = INVALID_MESSAGES.get(field, "Valor inválido")
    return messages
