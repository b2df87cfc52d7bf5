"""Registration form serving endpoints"""

import logging

from fastapi import APIRouter, Depends, Request

from training_signup.models.choices import AttendanceDay, AutomationLevel, Department
from training_signup.services.registration_form import (
    SUBMISSION_ERROR_MESSAGE,
    SUBMISSION_ERROR_TITLE,
    RegistrationForm,
)
from training_signup.services.registration_store import RegistrationStore, get_store
from training_signup.templating import templates

router = APIRouter(include_in_schema=False)

logger = logging.getLogger(__name__)


def _form_context(form: RegistrationForm) -> dict:
    return {
        "form": form,
        "departments": list(Department),
        "automation_levels": list(AutomationLevel),
        "attendance_days": list(AttendanceDay),
        "error_title": SUBMISSION_ERROR_TITLE,
        "error_message": SUBMISSION_ERROR_MESSAGE,
    }


@router.get("/")
async def serve_registration_form(
    request: Request, store: RegistrationStore = Depends(get_store)
):
    """Serve a blank registration form"""
    form = RegistrationForm(store)
    return templates.TemplateResponse(request, "form.html", _form_context(form))


@router.post("/")
async def submit_registration_form(
    request: Request, store: RegistrationStore = Depends(get_store)
):
    """Handle registration form submission"""
    form_data = await request.form()

    form = RegistrationForm(store)
    form.update(form_data)

    if form.submit():
        logger.info(f"Registration {form.registration.id} confirmed")
        return templates.TemplateResponse(
            request, "success.html", {"registration": form.registration}
        )

    # Store failure: entered values stay on the page so the user can retry
    status_code = 503 if form.notification else 422
    return templates.TemplateResponse(
        request, "form.html", _form_context(form), status_code=status_code
    )
