"""Fixed option sets offered by the registration form"""

from enum import Enum


class Department(str, Enum):
    """Department/area of the employee"""

    HR = "RH"
    IT = "TI"
    SALES = "Vendas"
    OPERATIONS = "Operações"
    OTHER = "Outro"


class AutomationLevel(str, Enum):
    """Self-reported familiarity with automation"""

    LOW = "Baixo"
    MEDIUM = "Médio"
    HIGH = "Alto"


class AttendanceDay(str, Enum):
    """Training days. Declaration order is the display and tie-break order."""

    DEC_11 = "11/12"
    DEC_12 = "12/12"
    DEC_13 = "13/12"

    @property
    def label(self) -> str:
        return f"{self.value} ({ATTENDANCE_DAY_WEEKDAYS[self]})"


ATTENDANCE_DAY_WEEKDAYS = {
    AttendanceDay.DEC_11: "Quarta-feira",
    AttendanceDay.DEC_12: "Quinta-feira",
    AttendanceDay.DEC_13: "Sexta-feira",
}

ATTENDANCE_DAYS = [day.value for day in AttendanceDay]
