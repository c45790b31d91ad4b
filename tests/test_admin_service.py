import pytest

from core.domain.errors import BackendError, TechLinkError, TransitionRefused, ValidationFailed
from core.domain.models import ApplicationStatus, EventStatus
from core.services import AdminService


@pytest.fixture
def admin(event_repo, application_repo, event_factory, application_factory):
    event_repo.events["evt-1"] = event_factory("evt-1", name="Hackathon")
    event_repo.events["evt-2"] = event_factory("evt-2", name="Workshop", start="2024-02-01", end="2024-02-05")
    for app in [
        application_factory("app-1", "evt-1", group_size=2, minutes=1),
        application_factory("app-2", "evt-1", group_size=4, minutes=2),
        application_factory("app-3", "evt-2", group_size=6, minutes=3),
    ]:
        application_repo.applications[app.id] = app
    return AdminService(event_repo, application_repo)


async def test_dashboard_summary(admin, now):
    events = await admin.fetch_events()
    apps = await admin.fetch_applications()

    dashboard = admin.build_dashboard(events, apps, now=now)

    assert dashboard.summary.total_applications == 3
    assert dashboard.summary.open_events == 1
    assert dashboard.summary.upcoming_events == 1
    assert dashboard.summary.average_group_size == 4.0
    assert [s.status for s in dashboard.events] == [EventStatus.OPEN, EventStatus.UPCOMING]
    assert dashboard.filtered_summary is None
    assert dashboard.event_names == {"evt-1": "Hackathon", "evt-2": "Workshop"}


async def test_applications_newest_first(admin):
    apps = await admin.fetch_applications()
    assert [a.id for a in apps] == ["app-3", "app-2", "app-1"]


async def test_dashboard_filtered_to_one_event(admin, now):
    events = await admin.fetch_events()
    apps = await admin.fetch_applications()

    dashboard = admin.build_dashboard(events, apps, event_filter="evt-1", now=now)

    assert {a.id for a in dashboard.applications} == {"app-1", "app-2"}
    assert dashboard.filtered_summary.total_applications == 2
    assert dashboard.filtered_summary.average_group_size == 3.0
    # Summary cards still cover everything
    assert dashboard.summary.total_applications == 3


async def test_filter_on_unknown_event_falls_back_to_all(admin, now):
    dashboard = admin.build_dashboard(await admin.fetch_events(), await admin.fetch_applications(),
                                      event_filter="deleted", now=now)
    assert dashboard.event_filter == "all"
    assert len(dashboard.applications) == 3


async def test_approve_is_visible_on_next_fetch(admin):
    status = await admin.review_application("app-1", "approved")
    assert status == ApplicationStatus.APPROVED

    apps = {a.id: a for a in await admin.fetch_applications()}
    assert apps["app-1"].status == ApplicationStatus.APPROVED


async def test_reject(admin):
    await admin.review_application("app-2", ApplicationStatus.REJECTED)
    assert (await admin.get_application("app-2")).status == ApplicationStatus.REJECTED


async def test_reviewed_application_cannot_change_again(admin):
    await admin.review_application("app-1", "approved")

    with pytest.raises(TransitionRefused) as exc:
        await admin.review_application("app-1", "rejected")

    assert "approved" in exc.value.message
    assert (await admin.get_application("app-1")).status == ApplicationStatus.APPROVED


@pytest.mark.parametrize("status", ["pending", "archived", ""])
async def test_only_approve_or_reject_are_allowed(admin, status):
    with pytest.raises(ValidationFailed):
        await admin.review_application("app-1", status)


async def test_review_missing_application(admin):
    with pytest.raises(TechLinkError) as exc:
        await admin.review_application("nope", "approved")
    assert exc.value.message == "Application not found"


async def test_backend_failure_leaves_status_untouched(admin, application_repo):
    application_repo.fail_with = "timeout"
    with pytest.raises(BackendError) as exc:
        await admin.review_application("app-1", "approved")
    assert exc.value.title == "Error updating status"

    application_repo.fail_with = None
    assert (await admin.get_application("app-1")).status == ApplicationStatus.PENDING


async def test_fetch_titles(admin, event_repo, application_repo):
    event_repo.fail_with = "boom"
    application_repo.fail_with = "boom"
    with pytest.raises(BackendError) as events_exc:
        await admin.fetch_events()
    with pytest.raises(BackendError) as apps_exc:
        await admin.fetch_applications()
    assert events_exc.value.title == "Error fetching events"
    assert apps_exc.value.title == "Error fetching applications"
