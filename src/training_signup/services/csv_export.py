"""CSV export of training registrations"""

from datetime import tzinfo
from typing import Iterable, Optional

from training_signup.models.registration import TrainingRegistration
from training_signup.utils.date_format import format_datetime_br

EXPORT_FILENAME = "inscricoes_treinamento.csv"

CSV_HEADERS = [
    "Nome Completo",
    "E-mail",
    "Departamento",
    "Nível Automação",
    "Acessibilidade",
    "Descrição Acessibilidade",
    "Dia Participação",
    "Observações",
    "Data Envio",
]


def _quoted(value: Optional[str]) -> str:
    # Embedded quotes are written as-is, not doubled
    return f'"{value or ""}"'


def yes_no(flag: bool) -> str:
    return "Sim" if flag else "Não"


def registration_to_csv_row(registration: TrainingRegistration, tz: tzinfo) -> str:
    return ",".join(
        [
            _quoted(registration.full_name),
            _quoted(registration.corporate_email),
            _quoted(registration.department),
            _quoted(registration.automation_level),
            yes_no(registration.needs_accessibility),
            _quoted(registration.accessibility_description),
            _quoted(registration.attendance_day),
            _quoted(registration.notes),
            # pt-BR date-times contain a comma, so the date is quoted too
            _quoted(format_datetime_br(registration.submitted_at, tz)),
        ]
    )


def registrations_to_csv(
    registrations: Iterable[TrainingRegistration], tz: tzinfo
) -> str:
    """
    Serialize registrations as CSV text.

    Args:
        registrations: The full record set, in display order
        tz: Time zone used to render submission dates

    Returns:
        Header line plus one line per registration, joined by newlines
    """
    lines = [",".join(CSV_HEADERS)]
    lines.extend(registration_to_csv_row(r, tz) for r in registrations)
    return "\n".join(lines)
