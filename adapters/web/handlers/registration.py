"""
Registration handler - team application form.
"""

import logging
from aiohttp import web

from core.domain.constants import MAX_GROUP_SIZE
from core.domain.errors import TechLinkError, ValidationFailed
from core.domain.models import RegistrationDraft
from adapters.web.handlers.common import get_services, get_state, redirect
from locales import t

logger = logging.getLogger(__name__)

routes = web.RouteTableDef()

_TEXT_FIELDS = (
    "selected_event", "project_name", "university",
    "leader_email", "leader_phone", "problem_statement", "solution",
)


def _update_draft(draft: RegistrationDraft, form) -> None:
    """Copy posted values into the draft so nothing typed is lost between requests"""
    for name in _TEXT_FIELDS:
        if name in form:
            setattr(draft, name, form.get(name, ""))
    members = form.getall("member", [])
    if members:
        draft.group_members = list(members)


@routes.post("/register")
async def register(request: web.Request) -> web.Response:
    state = get_state(request)
    form = await request.post()
    _update_draft(state.draft, form)
    action = form.get("action", "submit")

    if action == "add_member":
        if not state.draft.add_member():
            state.notify_error(ValidationFailed(t("registration_too_many_members", max=MAX_GROUP_SIZE)))
        return redirect("/#registration-form")

    if action.startswith("remove_member:"):
        try:
            index = int(action.split(":", 1)[1])
        except ValueError:
            raise web.HTTPBadRequest(text="Bad member index")
        state.draft.remove_member(index)
        return redirect("/#registration-form")

    services = get_services(request)
    try:
        event = await services.registration.submit(state.draft)
    except TechLinkError as e:
        # Draft stays as typed so the team can fix it and retry
        state.notify_error(e)
        return redirect("/#registration-form")

    state.notify(t("registration_success_title"), t("registration_success", event_name=event.name))
    state.draft = RegistrationDraft()
    return redirect("/")
