from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .admins.mysql_admin_repository import MySQLAdminRepository
from .admins.repository import AdminRepository
from .admins.service import AuthService
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.roster_service import RosterService
from .attendance.service import AttendanceService
from .database.connection import DBConfig, DatabaseConnection
from .members.mysql_member_repository import MySQLMemberRepository
from .members.repository import MemberRepository
from .members.service import MemberService
from .offerings.mysql_offering_repository import MySQLOfferingRepository
from .offerings.repository import OfferingRepository
from .offerings.service import OfferingService
from .prayer_requests.mysql_prayer_request_repository import MySQLPrayerRequestRepository
from .prayer_requests.repository import PrayerRequestRepository
from .prayer_requests.service import PrayerRequestService
from .stats.service import StatsService


@dataclass(frozen=True)
class Container:
    members_repo: MemberRepository
    attendance_repo: AttendanceRepository
    offerings_repo: OfferingRepository
    prayer_requests_repo: PrayerRequestRepository
    admins_repo: AdminRepository

    auth_service: AuthService
    member_service: MemberService
    attendance_service: AttendanceService
    roster_service: RosterService
    offering_service: OfferingService
    prayer_request_service: PrayerRequestService
    stats_service: StatsService

    conn: Optional[DatabaseConnection] = None


def wire(
    *,
    members_repo: MemberRepository,
    attendance_repo: AttendanceRepository,
    offerings_repo: OfferingRepository,
    prayer_requests_repo: PrayerRequestRepository,
    admins_repo: AdminRepository,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Build every service on top of the given repositories."""
    attendance_service = AttendanceService(attendance_repo)

    return Container(
        members_repo=members_repo,
        attendance_repo=attendance_repo,
        offerings_repo=offerings_repo,
        prayer_requests_repo=prayer_requests_repo,
        admins_repo=admins_repo,
        auth_service=AuthService(admins_repo),
        member_service=MemberService(members_repo),
        attendance_service=attendance_service,
        roster_service=RosterService(attendance_repo, members_repo, attendance_service),
        offering_service=OfferingService(offerings_repo, members_repo),
        prayer_request_service=PrayerRequestService(prayer_requests_repo, members_repo),
        stats_service=StatsService(offerings_repo, prayer_requests_repo),
        conn=conn,
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return wire(
        members_repo=MySQLMemberRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        offerings_repo=MySQLOfferingRepository(conn),
        prayer_requests_repo=MySQLPrayerRequestRepository(conn),
        admins_repo=MySQLAdminRepository(conn),
        conn=conn,
    )
