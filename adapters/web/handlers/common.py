"""
Shared helpers for web handlers.
"""

import logging
from functools import wraps
from aiohttp import web

from adapters.web.loader import SERVICES_KEY, Services
from adapters.web.state import APP_STATE, AppState

logger = logging.getLogger(__name__)


def get_state(request: web.Request) -> AppState:
    return request[APP_STATE]


def get_services(request: web.Request) -> Services:
    return request.app[SERVICES_KEY]


def redirect(location: str = "/") -> web.Response:
    """303 so the browser re-fetches with GET after every POST"""
    return web.Response(status=303, headers={"Location": location})


def html_response(text: str, status: int = 200) -> web.Response:
    return web.Response(text=text, status=status, content_type="text/html")


def admin_only(handler):
    """Admin routes: sessions that are not logged in are sent to the login view"""
    @wraps(handler)
    async def wrapper(request: web.Request) -> web.Response:
        state = get_state(request)
        if not state.is_logged_in:
            logger.info(f"[WEB] Anonymous request to {request.path}, showing login")
            state.request_login()
            return redirect("/")
        return await handler(request)
    return wrapper
