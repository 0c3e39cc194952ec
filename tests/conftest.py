from __future__ import annotations

import pytest

from church_admin.container import wire
from church_admin.main import create_app
from fakes import InMemoryAdmins, InMemoryAttendance, InMemoryMembers, InMemoryOfferings, InMemoryPrayerRequests

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "s3cret-pass"


@pytest.fixture
def members_repo():
    return InMemoryMembers()


@pytest.fixture
def attendance_repo(members_repo):
    return InMemoryAttendance(members_repo)


@pytest.fixture
def offerings_repo(members_repo):
    return InMemoryOfferings(members_repo)


@pytest.fixture
def prayer_requests_repo(members_repo):
    return InMemoryPrayerRequests(members_repo)


@pytest.fixture
def admins_repo():
    return InMemoryAdmins({ADMIN_USERNAME: ADMIN_PASSWORD})


@pytest.fixture
def container(members_repo, attendance_repo, offerings_repo, prayer_requests_repo, admins_repo):
    return wire(
        members_repo=members_repo,
        attendance_repo=attendance_repo,
        offerings_repo=offerings_repo,
        prayer_requests_repo=prayer_requests_repo,
        admins_repo=admins_repo,
    )


@pytest.fixture
def app(container):
    return create_app(container, settings_module="church_admin.config.testing")


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(client):
    with client.session_transaction() as sess:
        sess["admin_id"] = 1
        sess["admin_username"] = ADMIN_USERNAME
    return client
