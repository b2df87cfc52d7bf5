"""HR dashboard - search filter and aggregate counts over registrations"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional, Sequence

from training_signup.models.choices import ATTENDANCE_DAYS
from training_signup.models.registration import TrainingRegistration
from training_signup.services.registration_store import StoreError

logger = logging.getLogger(__name__)

FETCH_ERROR_MESSAGE = "Não foi possível carregar as inscrições."


def filter_registrations(
    registrations: Sequence[TrainingRegistration], search_term: str
) -> list[TrainingRegistration]:
    """Case-insensitive substring match on full name or corporate e-mail"""
    term = (search_term or "").lower()
    if not term:
        return list(registrations)
    return [
        r
        for r in registrations
        if term in r.full_name.lower() or term in r.corporate_email.lower()
    ]


def count_by_department(registrations: Sequence[TrainingRegistration]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for r in registrations:
        counts[r.department] = counts.get(r.department, 0) + 1
    return counts


def count_by_attendance_day(
    registrations: Sequence[TrainingRegistration],
    days: Sequence[str] = ATTENDANCE_DAYS,
) -> Dict[str, int]:
    """One bucket per known day, zero when nobody picked it"""
    counts = {day: 0 for day in days}
    for r in registrations:
        if r.attendance_day in counts:
            counts[r.attendance_day] += 1
    return counts


def most_popular_day(day_counts: Dict[str, int]) -> Optional[str]:
    """Day with the most registrations; the earliest day wins ties"""
    best: Optional[str] = None
    for day, count in day_counts.items():
        if best is None or count > day_counts[best]:
            best = day
    return best


def count_accessibility(registrations: Sequence[TrainingRegistration]) -> int:
    return sum(1 for r in registrations if r.needs_accessibility)


@dataclass
class DashboardSummary:
    total: int = 0
    by_department: Dict[str, int] = field(default_factory=dict)
    by_day: Dict[str, int] = field(default_factory=dict)
    most_popular_day: Optional[str] = None
    accessibility_count: int = 0

    @property
    def department_count(self) -> int:
        return len(self.by_department)

    def department_share(self, department: str) -> int:
        """Percentage of registrations from a department, rounded"""
        if not self.total:
            return 0
        return round(100 * self.by_department.get(department, 0) / self.total)

    def day_share(self, day: str) -> int:
        """Day count relative to the busiest day, as a bar width percentage"""
        peak = max(self.by_day.values(), default=0)
        if not peak:
            return 0
        return round(100 * self.by_day.get(day, 0) / peak)


def summarize(registrations: Sequence[TrainingRegistration]) -> DashboardSummary:
    by_day = count_by_attendance_day(registrations)
    return DashboardSummary(
        total=len(registrations),
        by_department=count_by_department(registrations),
        by_day=by_day,
        most_popular_day=most_popular_day(by_day),
        accessibility_count=count_accessibility(registrations),
    )


class RegistrationDashboard:
    """
    View state of the HR dashboard.

    Keeps the full record set separately from the filtered view. Aggregates
    are always derived from the full set.
    """

    def __init__(self, store, search_term: str = ""):
        self.store = store
        self.search_term = search_term or ""
        self.registrations: list[TrainingRegistration] = []
        self.loading = True
        self.error: Optional[str] = None

    def refresh(self) -> None:
        """
        Re-read every registration.

        A failed read keeps the previous records and sets ``error`` instead
        of raising, so the rest of the dashboard still renders.
        """
        try:
            self.registrations = self.store.list_all()
            self.error = None
        except StoreError as e:
            logger.warning(f"Dashboard fetch failed, keeping previous records: {e}")
            self.error = FETCH_ERROR_MESSAGE
        finally:
            self.loading = False

    def set_search(self, search_term: str) -> None:
        self.search_term = search_term or ""

    @property
    def filtered(self) -> list[TrainingRegistration]:
        return filter_registrations(self.registrations, self.search_term)

    @property
    def summary(self) -> DashboardSummary:
        return summarize(self.registrations)
