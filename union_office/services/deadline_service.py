"""
Deadline reminders derived from case due dates.

derive_deadline_notifications() is a pure function of the cases and the
current time. DeadlineScanner feeds its output through the idempotent
notification insert, so repeated scans on the same calendar day never
produce more than one reminder per case.
"""

import logging
import math
from datetime import date, datetime, time, timedelta

from union_office.config import settings
from union_office.models.case import Case
from union_office.models.notification import Notification, NotificationSeverity
from union_office.models.user import User
from union_office.repositories.case_repository import CaseRepository
from union_office.repositories.storage import StorageAdapter
from union_office.services.mail_service import MailService
from union_office.services.notification_service import NotificationService

logger = logging.getLogger(__name__)

DEADLINE_TITLE = "Case Deadline"
DEADLINE_TARGET_VIEW = "cases"
ONE_DAY = timedelta(days=1)


def deadline_notification_id(case_id: str, today: date) -> str:
    """Identifier of the reminder for case_id on the given calendar day"""
    return f"deadline-{case_id}-{today.isoformat()}"


def days_remaining(due_date: date, now: datetime) -> int:
    """
    Whole days from now until the due date.

    The due date counts from its midnight and the difference is rounded up,
    so a case due today yields 0 and a case due yesterday yields -1.
    """
    due_at = datetime.combine(due_date, time.min)
    return math.ceil((due_at - now) / ONE_DAY)


def derive_deadline_notifications(
    cases: list[Case],
    now: datetime,
    sede_id: str,
    window_days: int | None = None,
    danger_days: int | None = None,
) -> list[Notification]:
    """
    Build reminders for cases due within the window.

    Args:
        cases: Cases of one office
        now: Current local time
        sede_id: Office the reminders belong to
        window_days: Largest number of remaining days that still triggers a
            reminder (defaults to DEADLINE_WINDOW_DAYS)
        danger_days: Remaining days at or below which the reminder is "danger"
            (defaults to DEADLINE_DANGER_DAYS)

    Returns:
        One notification per case with 0 <= remaining days <= window_days.
        Overdue cases, cases further out and cases without a due date
        produce nothing.
    """
    if window_days is None:
        window_days = settings.DEADLINE_WINDOW_DAYS
    if danger_days is None:
        danger_days = settings.DEADLINE_DANGER_DAYS

    notifications = []
    for case in cases:
        if case.due_date is None:
            continue
        diff_days = days_remaining(case.due_date, now)
        if not 0 <= diff_days <= window_days:
            continue

        notifications.append(
            Notification(
                id=deadline_notification_id(case.id, now.date()),
                title=DEADLINE_TITLE,
                message=f'The case "{case.title}" is due in {diff_days} days.',
                severity=NotificationSeverity.DANGER if diff_days <= danger_days else NotificationSeverity.WARNING,
                date=now,
                is_read=False,
                target_view=DEADLINE_TARGET_VIEW,
                sede_id=sede_id,
            )
        )
    return notifications


class DeadlineScanner:
    """Scans an office's cases and stores today's deadline reminders"""

    def __init__(self, storage: StorageAdapter):
        self.case_repo = CaseRepository(storage)
        self.notifications = NotificationService(storage)

    def scan(self, sede_id: str, now: datetime | None = None) -> list[Notification]:
        """
        Run the deadline scan for one office.

        Args:
            sede_id: Office whose cases are scanned
            now: Current time (defaults to datetime.now())

        Returns:
            Reminders inserted by this run; reminders already stored today
            are not returned again
        """
        now = now or datetime.now()
        cases = self.case_repo.get_by_tenant(sede_id)
        candidates = derive_deadline_notifications(cases, now, sede_id)

        inserted = [n for n in candidates if self.notifications.save_notification(n)]
        logger.info(
            "Deadline scan for office %s: %d cases, %d due soon, %d new reminders",
            sede_id,
            len(cases),
            len(candidates),
            len(inserted),
        )
        return inserted

    def email_alerts(
        self,
        reminders: list[Notification],
        user: User,
        mail: MailService,
    ) -> int:
        """
        Email the user about the "danger" reminders among reminders.

        Each reminder is matched to its case through the id built for the
        day the reminder was created, so a scan that straddles midnight
        still finds its cases.

        Returns:
            Number of emails the mail service accepted
        """
        cases = self.case_repo.get_by_tenant(user.sede_id)

        sent = 0
        for reminder in reminders:
            if reminder.severity != NotificationSeverity.DANGER:
                continue
            day = reminder.date.date()
            case = next((c for c in cases if deadline_notification_id(c.id, day) == reminder.id), None)
            if case is None:
                continue
            result = mail.send_deadline_email(
                user.email,
                user.operator_name,
                case.title,
                case.due_date.isoformat(),
                case.priority.value,
            )
            if result.success:
                sent += 1
        return sent
