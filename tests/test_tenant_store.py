"""
Tests for the tenant-isolated store: isolation, forced ownership,
create/update branching, cross-office deletes and the activity log.
"""

import pytest
from datetime import date, timedelta

from union_office.core.exceptions import ForbiddenException, NotFoundException, ValidationException
from union_office.models.activity_log import ActivityLog
from union_office.models.calendar_event import CalendarEvent
from union_office.models.case import Case, CaseStatus
from union_office.models.document import Document
from union_office.models.member import Member, MemberStatus
from union_office.models.role import UserRole
from union_office.models.tenant_context import TenantContext
from union_office.models.user import User
from union_office.repositories.activity_log_repository import ActivityLogRepository
from union_office.repositories.member_repository import MemberRepository
from union_office.repositories.storage import StorageKeys
from union_office.schemas.case_schemas import CaseCreate, CaseUpdate
from union_office.schemas.event_schemas import EventUpdate
from union_office.schemas.member_schemas import MemberCreate, MemberUpdate
from union_office.services.activity_service import ActivityService
from union_office.services.case_service import CaseService
from union_office.services.document_service import DocumentService
from union_office.services.event_service import EventService
from union_office.services.member_service import MemberService


def make_member(**overrides) -> Member:
    fields = {"first_name": "Mario", "last_name": "Rossi", "tax_code": "RSSMRA80A01H501U"}
    fields.update(overrides)
    return Member(**fields)


def member_form(**overrides) -> MemberCreate:
    fields = {
        "first_name": "Giulia",
        "last_name": "Esposito",
        "birth_date": "1985-03-12",
        "collaboration_start": "2010-09-01",
        "tax_code": "spsgli85c52f839k",
        "phone": "+39 081 555 0101",
    }
    fields.update(overrides)
    return MemberCreate(**fields)


def case_form(**overrides) -> CaseCreate:
    fields = {
        "title": "Vertenza straordinari",
        "member_id": "m-1",
        "due_date": date.today() + timedelta(days=10),
    }
    fields.update(overrides)
    return CaseCreate(**fields)


class TestTenantIsolation:
    """Records of one office are never visible to another"""

    def test_list_only_returns_own_office(self, storage, office_a, office_b):
        members = MemberService(storage)
        members.save(make_member(first_name="Anna"), office_a)
        members.save(make_member(first_name="Bruno"), office_b)

        names_a = [m.first_name for m in members.list_records(office_a)]
        names_b = [m.first_name for m in members.list_records(office_b)]

        assert names_a == ["Anna"]
        assert names_b == ["Bruno"]

    @pytest.mark.parametrize(
        "service_class,record",
        [
            (CaseService, Case(title="Licenziamento", member_id="m-1")),
            (EventService, CalendarEvent(title="Assemblea", date=date(2026, 11, 3))),
            (DocumentService, Document(name="busta.pdf", type="application/pdf", size="12 KB", data="JVBERi0=")),
        ],
    )
    def test_every_collection_is_isolated(self, storage, office_a, office_b, service_class, record):
        service = service_class(storage)
        service.save(record, office_a)

        assert [r.id for r in service.list_records(office_a)] == [record.id]
        assert service.list_records(office_b) == []

    def test_get_other_office_record_not_found(self, storage, office_a, office_b):
        members = MemberService(storage)
        member = members.save(make_member(), office_a).record

        with pytest.raises(NotFoundException):
            members.get(member.id, office_b)

    def test_search_is_scoped(self, storage, office_a, office_b):
        members = MemberService(storage)
        members.save(make_member(last_name="Rossi"), office_a)
        members.save(make_member(last_name="Rossini"), office_b)

        assert [m.last_name for m in members.search("ross", office_a)] == ["Rossi"]


class TestForcedOwnership:
    """The stored sede_id is always the acting user's office"""

    def test_forged_sede_id_overwritten(self, storage, office_a, office_b):
        members = MemberService(storage)
        member = make_member(sede_id=office_b.sede_id)

        members.save(member, office_a)

        stored = MemberRepository(storage).get_all()
        assert [m.sede_id for m in stored] == [office_a.sede_id]
        assert members.list_records(office_b) == []

    def test_missing_sede_id_filled_in(self, storage, office_a):
        members = MemberService(storage)
        members.save(make_member(sede_id=None), office_a)

        assert MemberRepository(storage).get_all()[0].sede_id == office_a.sede_id

    def test_foreign_id_cannot_overwrite_other_office(self, storage, office_a, office_b):
        """Saving with another office's id creates a new record in the caller's office"""
        members = MemberService(storage)
        original = members.save(make_member(first_name="Bruno"), office_b).record

        result = members.save(make_member(id=original.id, first_name="Hijack"), office_a)

        assert result.created is True
        assert members.get(original.id, office_b).first_name == "Bruno"
        assert members.get(original.id, office_a).first_name == "Hijack"


class TestCreateUpdateBranch:
    """Existing ids update in place, new ids append"""

    def test_new_id_appends(self, storage, office_a):
        members = MemberService(storage)
        first = members.save(make_member(first_name="Anna"), office_a)
        second = members.save(make_member(first_name="Luca"), office_a)

        assert first.created and second.created
        assert [m.first_name for m in members.list_records(office_a)] == ["Anna", "Luca"]

    def test_existing_id_updates_in_place(self, storage, office_a):
        members = MemberService(storage)
        first = members.save(make_member(first_name="Anna"), office_a).record
        members.save(make_member(first_name="Luca"), office_a)

        result = members.save(make_member(id=first.id, first_name="Annalisa"), office_a)

        assert result.created is False
        stored = members.list_records(office_a)
        assert len(stored) == 2
        assert [m.first_name for m in stored] == ["Annalisa", "Luca"]

    def test_labels_follow_branch(self, storage, office_a):
        members = MemberService(storage)
        member = members.save(make_member(), office_a).record
        members.save(member, office_a)

        actions = [log.action for log in ActivityService(storage).list_logs(office_a)]
        assert actions[:2] == ["Member Updated", "New Member"]


class TestCrossTenantDelete:
    """Deleting another office's id is a silent no-op"""

    def test_delete_other_office_record(self, storage, office_a, office_b):
        members = MemberService(storage)
        member = members.save(make_member(), office_b).record

        assert members.delete(member.id, office_a) is False
        assert [m.id for m in members.list_records(office_b)] == [member.id]

    def test_delete_own_record(self, storage, office_a):
        members = MemberService(storage)
        keep = members.save(make_member(first_name="Anna"), office_a).record
        drop = members.save(make_member(first_name="Luca"), office_a).record

        assert members.delete(drop.id, office_a) is True
        assert [m.id for m in members.list_records(office_a)] == [keep.id]

    def test_delete_is_logged_even_when_nothing_matches(self, storage, office_a):
        MemberService(storage).delete("unknown", office_a)

        latest = ActivityService(storage).list_logs(office_a)[0]
        assert latest.action == "Member Deleted"
        assert latest.details == "Removed member ID: unknown"


class TestRoleGuards:
    def test_viewer_cannot_write(self, storage, office_a):
        viewer = TenantContext(
            user=User(
                email="viewer@a.it",
                office_name="Sede Roma",
                operator_name="Vera",
                role=UserRole.VIEWER,
                sede_id=office_a.sede_id,
            )
        )
        members = MemberService(storage)

        with pytest.raises(ForbiddenException):
            members.save(make_member(), viewer)
        with pytest.raises(ForbiddenException):
            members.delete("any", viewer)

    def test_viewer_can_read(self, storage, office_a):
        members = MemberService(storage)
        members.save(make_member(), office_a)
        viewer = TenantContext(user=office_a.user.model_copy(update={"role": UserRole.VIEWER}))

        assert len(members.list_records(viewer)) == 1

    def test_operator_cannot_read_activity_log(self, storage, office_a):
        operator = TenantContext(user=office_a.user.model_copy(update={"role": UserRole.OPERATOR}))

        with pytest.raises(ForbiddenException):
            ActivityService(storage).list_logs(operator)


class TestMemberService:
    def test_create_member_enrolls_today(self, storage, office_a):
        member = MemberService(storage).create_member(member_form(), office_a).record

        assert member.tax_code == "SPSGLI85C52F839K"
        assert member.enrollment_date == date.today()
        assert member.status == MemberStatus.ACTIVE
        assert [h.action for h in member.history] == ["Enrolled"]

    def test_status_change_recorded_in_history(self, storage, office_a):
        members = MemberService(storage)
        member = members.create_member(member_form(), office_a).record

        updated = members.update_member(member.id, MemberUpdate(status=MemberStatus.SUSPENDED), office_a).record

        assert updated.status == MemberStatus.SUSPENDED
        assert updated.history[-1].action == "Status changed to suspended"

    def test_partial_update_keeps_other_fields(self, storage, office_a):
        members = MemberService(storage)
        member = members.create_member(member_form(), office_a).record

        updated = members.update_member(member.id, MemberUpdate(notes="Delegato RSU"), office_a).record

        assert updated.notes == "Delegato RSU"
        assert updated.first_name == "Giulia"
        assert len(updated.history) == 1

    def test_null_required_field_rejected(self, storage, office_a, office_b):
        """Clearing a required field fails and leaves every office readable"""
        members = MemberService(storage)
        member = members.create_member(member_form(), office_a).record
        revision = storage.snapshot(StorageKeys.MEMBERS).revision

        with pytest.raises(ValidationException, match="first_name"):
            members.update_member(member.id, MemberUpdate(first_name=None), office_a)

        assert storage.snapshot(StorageKeys.MEMBERS).revision == revision
        assert members.get(member.id, office_a).first_name == "Giulia"
        assert members.list_records(office_b) == []


class TestCaseService:
    def test_status_change_appends_timeline(self, storage, office_a):
        cases = CaseService(storage)
        case = cases.create_case(case_form(), office_a).record

        moved = cases.change_status(case.id, CaseStatus.IN_PROGRESS, office_a)

        assert moved.status == CaseStatus.IN_PROGRESS
        assert moved.timeline[-1].content == "Moved to status: IN PROGRESS"
        assert moved.timeline[-1].user == "Anna"
        assert moved.last_modified is not None

    def test_same_status_writes_nothing(self, storage, office_a):
        cases = CaseService(storage)
        case = cases.create_case(case_form(), office_a).record
        revision = storage.snapshot(StorageKeys.CASES).revision

        cases.change_status(case.id, CaseStatus.NEW, office_a)

        assert storage.snapshot(StorageKeys.CASES).revision == revision

    def test_update_with_status_records_timeline(self, storage, office_a):
        cases = CaseService(storage)
        case = cases.create_case(case_form(), office_a).record

        updated = cases.update_case(
            case.id, CaseUpdate(title="Vertenza ferie", status=CaseStatus.URGENT), office_a
        ).record

        assert updated.title == "Vertenza ferie"
        assert [e.content for e in updated.timeline] == ["Moved to status: URGENT"]

    def test_attachment_uploaded_by_operator(self, storage, office_a):
        attachment = {"name": "lettera.pdf", "type": "application/pdf", "size": "3 KB", "data": "JVBERi0="}
        cases = CaseService(storage)
        case = cases.create_case(case_form(attachment=attachment), office_a).record

        assert case.attachment.uploaded_by == "Anna"

        cleared = cases.update_case(case.id, CaseUpdate(remove_attachment=True), office_a).record
        assert cleared.attachment is None

    def test_add_note(self, storage, office_a):
        cases = CaseService(storage)
        case = cases.create_case(case_form(), office_a).record

        noted = cases.add_note(case.id, "Convocazione inviata all'azienda", office_a)

        assert noted.timeline[-1].content == "Convocazione inviata all'azienda"

    def test_filters(self, storage, office_a):
        cases = CaseService(storage)
        cases.create_case(case_form(member_id="m-1"), office_a)
        urgent = cases.create_case(case_form(member_id="m-2", status=CaseStatus.URGENT), office_a).record

        assert [c.id for c in cases.list_cases(office_a, status=CaseStatus.URGENT)] == [urgent.id]
        assert [c.id for c in cases.list_cases(office_a, member_id="m-2")] == [urgent.id]

    def test_null_title_rejected(self, storage, office_a, office_b):
        cases = CaseService(storage)
        case = cases.create_case(case_form(), office_a).record
        cases.create_case(case_form(title="Vertenza Napoli"), office_b)

        with pytest.raises(ValidationException, match="title"):
            cases.update_case(case.id, CaseUpdate(title=None, status=CaseStatus.URGENT), office_a)

        stored = cases.get(case.id, office_a)
        assert stored.title == "Vertenza straordinari"
        assert stored.status == CaseStatus.NEW
        assert [c.title for c in cases.list_cases(office_b)] == ["Vertenza Napoli"]


class TestEventService:
    def test_events_sorted_and_ranged(self, storage, office_a):
        events = EventService(storage)
        events.save(CalendarEvent(title="Later", date=date(2026, 12, 1)), office_a)
        events.save(CalendarEvent(title="Sooner", date=date(2026, 11, 1)), office_a)

        assert [e.title for e in events.list_events(office_a)] == ["Sooner", "Later"]
        in_november = events.list_events(office_a, start_date=date(2026, 11, 1), end_date=date(2026, 11, 30))
        assert [e.title for e in in_november] == ["Sooner"]

    def test_null_title_rejected(self, storage, office_a, office_b):
        events = EventService(storage)
        event = events.save(CalendarEvent(title="Assemblea", date=date(2026, 11, 5)), office_a).record

        with pytest.raises(ValidationException, match="title"):
            events.update_event(event.id, EventUpdate(title=None), office_a)

        assert [e.title for e in events.list_events(office_a)] == ["Assemblea"]
        assert events.list_events(office_b) == []


class TestActivityLog:
    def test_mutations_are_logged_newest_first(self, storage, office_a):
        MemberService(storage).save(make_member(), office_a)
        CaseService(storage).save(Case(title="Licenziamento", member_id="m-1"), office_a)

        logs = ActivityService(storage).list_logs(office_a)

        assert [log.action for log in logs[:2]] == ["New Case", "New Member"]
        assert logs[0].details == "Opened new case: Licenziamento"
        assert logs[0].user_name == "Anna"
        assert all(log.sede_id == office_a.sede_id for log in logs)

    def test_logs_are_isolated(self, storage, office_a, office_b):
        MemberService(storage).save(make_member(), office_b)

        actions_a = [log.action for log in ActivityService(storage).list_logs(office_a)]
        assert "New Member" not in actions_a

    def test_cap_keeps_most_recent(self, storage, office_a, office_b):
        """With a full log, one more entry drops exactly the oldest"""
        limit = 2000
        seeded = [
            ActivityLog(
                id=f"log-{i}",
                user_id="u",
                user_name="Seed",
                action="Seed",
                details=str(i),
                sede_id=office_a.sede_id if i % 2 else office_b.sede_id,
            ).model_dump(mode="json")
            for i in range(limit, 0, -1)
        ]
        storage.write(StorageKeys.LOGS, seeded)

        ActivityService(storage, limit=limit).log(office_a.user, "New Member", "Added Rossi Mario")

        logs = ActivityLogRepository(storage, limit=limit).get_all()
        assert len(logs) == limit
        assert logs[0].action == "New Member"
        assert logs[-1].id == "log-2"
        assert "log-1" not in {log.id for log in logs}

    def test_small_cap(self, storage, office_a):
        service = ActivityService(storage, limit=3)
        for i in range(5):
            service.log(office_a.user, "Note", f"entry {i}")

        assert [log.details for log in ActivityLogRepository(storage).get_all()] == [
            "entry 4",
            "entry 3",
            "entry 2",
        ]
