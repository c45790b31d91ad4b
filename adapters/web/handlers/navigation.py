"""
Navigation handler - renders the current view and switches between views.
"""

import logging
from aiohttp import web

from config.features import features
from core.domain.errors import TechLinkError
from core.domain.models import EventStatus
from core.domain.status import event_status, utc_now
from adapters.web import pages
from adapters.web.state import AppState, AppView
from adapters.web.handlers.common import get_services, get_state, html_response, redirect

logger = logging.getLogger(__name__)

routes = web.RouteTableDef()


async def _render_registration(request: web.Request, state: AppState) -> str:
    services = get_services(request)
    try:
        state.events = await services.registration.list_events()
    except TechLinkError as e:
        state.notify_error(e)

    now = utc_now()
    events = [(e, event_status(e, now)) for e in state.events]
    if features.HIDE_CLOSED_EVENTS:
        events = [(e, s) for e, s in events if s != EventStatus.CLOSED]
    return pages.registration_page(events, state.draft)


async def _render_admin(request: web.Request, state: AppState) -> str:
    services = get_services(request)
    event_filter = request.query.get("event")
    if event_filter:
        state.application_filter = event_filter

    # Each collection is refreshed on its own; a failed fetch keeps the previous copy
    try:
        state.events = await services.admin.fetch_events()
    except TechLinkError as e:
        state.notify_error(e)
    try:
        state.applications = await services.admin.fetch_applications()
    except TechLinkError as e:
        state.notify_error(e)

    dashboard = services.admin.build_dashboard(
        state.events, state.applications, state.application_filter, utc_now(),
    )
    state.application_filter = dashboard.event_filter
    return pages.admin_page(dashboard)


@routes.get("/")
async def index(request: web.Request) -> web.Response:
    """Render whatever view the session is on"""
    state = get_state(request)
    if state.current_view == AppView.ADMIN and not state.is_logged_in:
        state.request_login()

    if state.current_view == AppView.LOGIN:
        body = pages.login_page()
    elif state.current_view == AppView.ADMIN:
        body = await _render_admin(request, state)
    else:
        body = await _render_registration(request, state)
    return html_response(pages.layout(state, body))


@routes.post("/navigate")
async def navigate(request: web.Request) -> web.Response:
    state = get_state(request)
    form = await request.post()
    try:
        target = AppView(form.get("view", ""))
    except ValueError:
        raise web.HTTPBadRequest(text="Unknown view")
    view = state.change_view(target)
    logger.debug(f"[WEB] navigate {target.value} -> {view.value}")
    return redirect("/")


@routes.get("/health")
async def health(request: web.Request) -> web.Response:
    return web.json_response({"status": "ok"})
