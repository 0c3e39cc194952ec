from __future__ import annotations

from enum import Enum


class UserType(str, Enum):
    """Member vs guest classification of a person record."""

    MEMBER = "MEMBER"
    GUEST = "GUEST"


class AttendanceType(str, Enum):
    """Kind of gathering an attendance session was taken for."""

    SUNDAY_SERVICE = "SUNDAY_SERVICE"
    BIBLE_STUDY = "BIBLE_STUDY"
    PRAYER_MEETING = "PRAYER_MEETING"
    YOUTH_SERVICE = "YOUTH_SERVICE"
    MIDWEEK_SERVICE = "MIDWEEK_SERVICE"
    SPECIAL_EVENT = "SPECIAL_EVENT"


class AttendanceStatus(str, Enum):
    """Per-member status stored on a session roster."""

    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    LATE = "LATE"
    EXCUSED = "EXCUSED"


class OfferingType(str, Enum):
    TITHE = "TITHE"
    OFFERING = "OFFERING"
    BUILDING_FUND = "BUILDING_FUND"
    MISSIONS = "MISSIONS"
    SPECIAL_OFFERING = "SPECIAL_OFFERING"
    THANKSGIVING = "THANKSGIVING"
    OTHER = "OTHER"


class PrayerRequestStatus(str, Enum):
    PENDING = "PENDING"
    DONE = "DONE"
    ANSWERED = "ANSWERED"
