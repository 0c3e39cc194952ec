from datetime import date

import pytest

from church_admin.attendance.schemas import RosterCreate, RosterQuery, RosterReplace
from church_admin.common.validators import validate
from church_admin.core.enums import AttendanceStatus
from church_admin.core.exceptions import ConflictError, NotFoundError, ValidationError
from factories import member_input


@pytest.fixture
def members(container):
    return [
        container.member_service.create(member_input(first_name="Ana", last_name="Cruz")),
        container.member_service.create(member_input(first_name="Ben", last_name="Abad")),
        container.member_service.create(member_input(first_name="Carl", last_name="Cruz")),
    ]


def _entries(*pairs):
    return [{"memberId": m, "status": s} for m, s in pairs]


def test_create_with_roster(container, members):
    ana, ben, _ = members
    data = validate(
        RosterCreate,
        {"date": "2024-04-07", "memberAttendances": _entries((ana.member_id, "PRESENT"), (ben.member_id, "LATE"))},
    )

    result = container.roster_service.create_with_roster(data)

    assert result.session.date.date() == date(2024, 4, 7)
    assert {(r.member_id, r.status) for r in result.member_attendances} == {
        (ana.member_id, AttendanceStatus.PRESENT),
        (ben.member_id, AttendanceStatus.LATE),
    }
    assert all(r.member is not None for r in result.member_attendances)


def test_create_with_roster_conflicts_on_same_day_and_type(container, members):
    data = validate(RosterCreate, {"date": "2024-04-07", "memberAttendances": []})
    container.roster_service.create_with_roster(data)

    with pytest.raises(ConflictError):
        container.roster_service.create_with_roster(data)


def test_create_with_unknown_member_creates_nothing(container, attendance_repo, members):
    data = validate(RosterCreate, {"date": "2024-04-07", "memberAttendances": _entries((999, "PRESENT"))})

    with pytest.raises(NotFoundError):
        container.roster_service.create_with_roster(data)
    assert attendance_repo.sessions == {}


def test_duplicate_member_in_submission_is_rejected(members):
    ana = members[0]
    with pytest.raises(ValidationError):
        validate(RosterReplace, {"memberAttendances": _entries((ana.member_id, "PRESENT"), (ana.member_id, "ABSENT"))})


def test_replace_roster_is_a_full_replace(container, members):
    ana, ben, carl = members
    created = container.roster_service.create_with_roster(
        validate(
            RosterCreate,
            {"date": "2024-04-07", "memberAttendances": _entries((ana.member_id, "PRESENT"), (ben.member_id, "PRESENT"))},
        )
    )
    attendance_id = created.session.attendance_id

    result = container.roster_service.replace_roster(
        attendance_id,
        validate(RosterReplace, {"memberAttendances": _entries((ben.member_id, "ABSENT"), (carl.member_id, "EXCUSED"))}),
    )
    assert result == {"success": True, "count": 2}

    view = container.roster_service.get_roster(RosterQuery(attendance_id=attendance_id))
    assert {(r.member_id, r.status) for r in view.member_attendances} == {
        (ben.member_id, AttendanceStatus.ABSENT),
        (carl.member_id, AttendanceStatus.EXCUSED),
    }


def test_replace_roster_of_missing_session(container, members):
    with pytest.raises(NotFoundError):
        container.roster_service.replace_roster(42, RosterReplace(member_attendances=[]))


def test_replace_roster_with_unknown_member_keeps_old_roster(container, members):
    ana = members[0]
    created = container.roster_service.create_with_roster(
        validate(RosterCreate, {"date": "2024-04-07", "memberAttendances": _entries((ana.member_id, "PRESENT"))})
    )
    attendance_id = created.session.attendance_id

    with pytest.raises(NotFoundError):
        container.roster_service.replace_roster(
            attendance_id, validate(RosterReplace, {"memberAttendances": _entries((999, "PRESENT"))})
        )

    view = container.roster_service.get_roster(RosterQuery(attendance_id=attendance_id))
    assert [r.member_id for r in view.member_attendances] == [ana.member_id]


def test_get_roster_lists_members_by_last_then_first_name(container, members):
    view = container.roster_service.get_roster(RosterQuery())

    assert [(m.last_name, m.first_name) for m in view.members] == [("Abad", "Ben"), ("Cruz", "Ana"), ("Cruz", "Carl")]
    assert view.member_attendances == []

    filtered = container.roster_service.get_roster(RosterQuery(search="cruz"))
    assert [m.first_name for m in filtered.members] == ["Ana", "Carl"]
