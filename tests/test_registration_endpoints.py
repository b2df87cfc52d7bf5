"""Test registration form page and submission endpoints"""

import logging
import re

from tests.config import VALID_FORM_DATA

logger = logging.getLogger(__name__)


class TestRegistrationFormPage:
    """GET / serves the blank form"""

    def test_form_page(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert "text/html" in response.headers.get("content-type", "")
        assert "Formulário de Inscrição" in response.text
        assert "Enviar Inscrição" in response.text
        assert 'name="full_name"' in response.text
        # Description input starts hidden until accessibility is requested
        assert re.search(r'id="accessibility-description-field"\s+hidden', response.text)

    def test_form_lists_choices(self, client):
        response = client.get("/")

        for value in ("RH", "TI", "Vendas", "Operações", "Outro"):
            assert f'value="{value}"' in response.text
        for value in ("Baixo", "Médio", "Alto"):
            assert f'value="{value}"' in response.text
        assert "11/12 (Quarta-feira)" in response.text
        assert "13/12 (Sexta-feira)" in response.text


class TestRegistrationSubmission:
    """POST / validates, stores and confirms"""

    def test_valid_submission(self, client, store):
        response = client.post("/", data=VALID_FORM_DATA)

        logger.info(f"Response status: {response.status_code}")
        assert response.status_code == 200
        assert "Inscrição realizada com sucesso!" in response.text
        assert "Nova Inscrição" in response.text

        registrations = store.list_all()
        assert len(registrations) == 1
        registration = registrations[0]
        assert registration.full_name == "Ana Silva"
        assert registration.corporate_email == "ana@empresa.com"
        assert registration.department == "TI"
        assert registration.automation_level == "Alto"
        assert registration.needs_accessibility is False
        assert registration.accessibility_description is None
        assert registration.attendance_day == "12/12"
        assert registration.notes is None
        assert registration.id is not None
        assert registration.submitted_at is not None

    def test_missing_name_rerenders_form(self, client, store):
        response = client.post("/", data={**VALID_FORM_DATA, "full_name": ""})

        assert response.status_code == 422
        assert "Nome completo é obrigatório" in response.text
        # Entered values survive the failed validation
        assert 'value="ana@empresa.com"' in response.text
        assert store.list_all() == []

    def test_invalid_email_rerenders_form(self, client, store):
        response = client.post(
            "/", data={**VALID_FORM_DATA, "corporate_email": "ana.empresa.com"}
        )

        assert response.status_code == 422
        assert "E-mail inválido" in response.text
        assert 'value="Ana Silva"' in response.text
        assert store.list_all() == []

    def test_missing_accessibility_choice_defaults_to_no(self, client, store):
        data = {k: v for k, v in VALID_FORM_DATA.items() if k != "needs_accessibility"}

        response = client.post("/", data=data)

        assert response.status_code == 200
        assert store.list_all()[0].needs_accessibility is False

    def test_description_dropped_without_accessibility(self, client, store):
        response = client.post(
            "/",
            data={
                **VALID_FORM_DATA,
                "needs_accessibility": "nao",
                "accessibility_description": "Cadeira de rodas",
            },
        )

        assert response.status_code == 200
        assert store.list_all()[0].accessibility_description is None

    def test_description_kept_with_accessibility(self, client, store):
        response = client.post(
            "/",
            data={
                **VALID_FORM_DATA,
                "needs_accessibility": "sim",
                "accessibility_description": "Cadeira de rodas",
            },
        )

        assert response.status_code == 200
        registration = store.list_all()[0]
        assert registration.needs_accessibility is True
        assert registration.accessibility_description == "Cadeira de rodas"

    def test_store_failure_keeps_entered_values(self, failing_client, failing_store):
        response = failing_client.post(
            "/", data={**VALID_FORM_DATA, "notes": "Chego atrasado"}
        )

        assert response.status_code == 503
        assert "Erro ao enviar inscrição" in response.text
        assert "Tente novamente mais tarde." in response.text
        assert 'value="Ana Silva"' in response.text
        assert "Chego atrasado" in response.text
        assert "Inscrição realizada com sucesso!" not in response.text
        assert failing_store.create_calls == 1
