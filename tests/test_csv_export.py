"""Tests for CSV export of registrations"""

import uuid
from datetime import datetime, timedelta, timezone

from tests.config import VALID_FORM_DATA
from training_signup.models.registration import TrainingRegistration
from training_signup.services.csv_export import (
    CSV_HEADERS,
    EXPORT_FILENAME,
    registrations_to_csv,
)

HEADER_LINE = (
    "Nome Completo,E-mail,Departamento,Nível Automação,Acessibilidade,"
    "Descrição Acessibilidade,Dia Participação,Observações,Data Envio"
)


def _registration(**overrides) -> TrainingRegistration:
    fields = {
        "id": uuid.uuid4(),
        "full_name": "Ana Silva",
        "corporate_email": "ana@empresa.com",
        "department": "TI",
        "automation_level": "Alto",
        "needs_accessibility": False,
        "attendance_day": "12/12",
        "submitted_at": datetime(2024, 12, 10, 13, 30, 5, tzinfo=timezone.utc),
    }
    fields.update(overrides)
    return TrainingRegistration(**fields)


class TestRegistrationsToCsv:
    """CSV serialization"""

    def test_header_and_one_line_per_record(self):
        records = [
            _registration(),
            _registration(
                full_name="João Pereira",
                corporate_email="joao@empresa.com",
                department="RH",
                automation_level="Baixo",
                needs_accessibility=True,
                accessibility_description="Rampa",
                attendance_day="11/12",
                notes="Vegetariano",
            ),
        ]

        lines = registrations_to_csv(records, timezone.utc).split("\n")

        assert len(lines) == 3
        assert lines[0] == HEADER_LINE
        assert lines[1] == (
            '"Ana Silva","ana@empresa.com","TI","Alto",Não,"","12/12","",'
            '"10/12/2024, 13:30:05"'
        )
        assert lines[2] == (
            '"João Pereira","joao@empresa.com","RH","Baixo",Sim,"Rampa","11/12",'
            '"Vegetariano","10/12/2024, 13:30:05"'
        )

    def test_header_matches_column_names(self):
        assert HEADER_LINE == ",".join(CSV_HEADERS)

    def test_no_records_is_header_only(self):
        assert registrations_to_csv([], timezone.utc) == HEADER_LINE

    def test_embedded_quotes_are_not_escaped(self):
        record = _registration(notes='Sala "B"')

        row = registrations_to_csv([record], timezone.utc).split("\n")[1]

        assert '"Sala "B""' in row

    def test_date_in_display_time_zone(self):
        brasilia = timezone(timedelta(hours=-3))
        record = _registration(
            submitted_at=datetime(2024, 12, 10, 1, 15, 0, tzinfo=timezone.utc)
        )

        row = registrations_to_csv([record], brasilia).split("\n")[1]

        assert row.endswith('"09/12/2024, 22:15:00"')

    def test_naive_dates_are_utc(self):
        record = _registration(submitted_at=datetime(2024, 12, 10, 13, 30, 5))

        row = registrations_to_csv([record], timezone.utc).split("\n")[1]

        assert row.endswith('"10/12/2024, 13:30:05"')


class TestExportEndpoint:
    """GET /rh/export.csv"""

    def test_export_downloads_full_record_set(self, client):
        client.post("/", data=VALID_FORM_DATA)
        client.post(
            "/",
            data={**VALID_FORM_DATA, "full_name": "Bruno Costa", "corporate_email": "bruno@empresa.com"},
        )

        response = client.get("/rh/export.csv", params={"q": "ana"})

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert (
            response.headers["content-disposition"]
            == f'attachment; filename="{EXPORT_FILENAME}"'
        )
        lines = response.text.split("\n")
        assert len(lines) == 3
        assert lines[0] == HEADER_LINE
        # Newest submission first
        assert lines[1].startswith('"Bruno Costa"')
        assert lines[2].startswith('"Ana Silva"')

    def test_export_store_failure(self, failing_client):
        response = failing_client.get("/rh/export.csv")

        assert response.status_code == 503
        assert "exportar" in response.json()["detail"]
