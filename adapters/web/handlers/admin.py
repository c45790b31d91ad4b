"""
Admin handler - application review and the event editor.
Every mutation redirects back to the dashboard, which re-fetches both collections.
"""

import logging
from typing import Optional
from aiohttp import web

from core.domain.errors import TechLinkError
from adapters.web import pages
from adapters.web.handlers.common import (
    admin_only, get_services, get_state, html_response, redirect,
)
from locales import t

logger = logging.getLogger(__name__)

routes = web.RouteTableDef()


# === APPLICATIONS ===

@routes.get("/admin/applications/{application_id}")
@admin_only
async def application_detail(request: web.Request) -> web.Response:
    state = get_state(request)
    services = get_services(request)
    application_id = request.match_info["application_id"]
    try:
        application = await services.admin.get_application(application_id)
    except TechLinkError as e:
        state.notify_error(e)
        return redirect("/")

    event_name = next((e.name for e in state.events if e.id == application.event_id), None)
    body = pages.application_detail_page(application, event_name)
    return html_response(pages.layout(state, body, title=application.project_name))


@routes.post("/admin/applications/{application_id}/status")
@admin_only
async def application_status(request: web.Request) -> web.Response:
    state = get_state(request)
    services = get_services(request)
    form = await request.post()
    application_id = request.match_info["application_id"]

    try:
        status = await services.admin.review_application(application_id, form.get("status", ""))
    except TechLinkError as e:
        state.notify_error(e)
        return redirect("/")

    state.notify(t("application_status_done", status=status.value))
    return redirect("/")


# === EVENT EDITOR ===

def _form_values(form) -> dict:
    return {
        "name": form.get("name", ""),
        "start_date": form.get("start_date", ""),
        "end_date": form.get("end_date", ""),
        "is_manually_closed": "is_manually_closed" in form,
    }


async def _save(request: web.Request, event_id: Optional[str]) -> web.Response:
    state = get_state(request)
    services = get_services(request)
    values = _form_values(await request.post())

    try:
        event_data = services.events.parse_form(**values)
        await services.events.save_event(event_data, event_id)
    except TechLinkError as e:
        # Editor stays open with what was typed
        state.notify_error(e)
        body = pages.event_editor_page(values, event_id)
        return html_response(pages.layout(state, body), status=400)

    state.notify(t("event_updated") if event_id else t("event_created"))
    return redirect("/")


@routes.get("/admin/events/new")
@admin_only
async def event_new(request: web.Request) -> web.Response:
    state = get_state(request)
    body = pages.event_editor_page({})
    return html_response(pages.layout(state, body, title=t("event_new_header")))


@routes.post("/admin/events")
@admin_only
async def event_create(request: web.Request) -> web.Response:
    return await _save(request, None)


@routes.get("/admin/events/{event_id}/edit")
@admin_only
async def event_edit(request: web.Request) -> web.Response:
    state = get_state(request)
    services = get_services(request)
    try:
        event = await services.events.get_event(request.match_info["event_id"])
    except TechLinkError as e:
        state.notify_error(e)
        return redirect("/")

    body = pages.event_editor_page(pages.event_form_values(event), event.id)
    return html_response(pages.layout(state, body, title=t("event_edit_header")))


@routes.post("/admin/events/{event_id}")
@admin_only
async def event_update(request: web.Request) -> web.Response:
    return await _save(request, request.match_info["event_id"])


@routes.post("/admin/events/{event_id}/delete")
@admin_only
async def event_delete(request: web.Request) -> web.Response:
    state = get_state(request)
    services = get_services(request)
    try:
        await services.events.delete_event(request.match_info["event_id"])
    except TechLinkError as e:
        state.notify_error(e)
        return redirect("/")

    state.notify(t("event_deleted"))
    return redirect("/")
