"""
Auth handler - admin login gate and logout.
"""

import logging
from aiohttp import web

from core.domain.errors import TechLinkError
from adapters.web.handlers.common import get_services, get_state, redirect
from locales import t

logger = logging.getLogger(__name__)

routes = web.RouteTableDef()


@routes.post("/login")
async def login(request: web.Request) -> web.Response:
    state = get_state(request)
    form = await request.post()
    services = get_services(request)

    try:
        identity = await services.auth.login(form.get("email", ""), form.get("password", ""))
    except TechLinkError as e:
        state.notify_error(e)
        state.request_login()
        return redirect("/")

    state.login_succeeded(identity)
    state.notify(t("login_success_title"), t("login_success"))
    return redirect("/")


@routes.post("/login/cancel")
async def login_cancel(request: web.Request) -> web.Response:
    get_state(request).login_cancelled()
    return redirect("/")


@routes.post("/logout")
async def logout(request: web.Request) -> web.Response:
    state = get_state(request)
    if state.admin:
        logger.info(f"[AUTH] {state.admin.email or state.admin.user_id} logged out")
    state.logout()
    state.notify(t("logout_success"))
    return redirect("/")
