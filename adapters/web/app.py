"""
aiohttp application factory.
"""

import logging
from typing import Optional
from aiohttp import web

from config.settings import Settings, settings as default_settings
from adapters.web.handlers import routes
from adapters.web.loader import SERVICES_KEY, Services
from adapters.web.state import APP_STATE, SessionStore

logger = logging.getLogger(__name__)

SESSIONS_KEY = web.AppKey("sessions", SessionStore)
SETTINGS_KEY = web.AppKey("settings", Settings)


@web.middleware
async def session_middleware(request: web.Request, handler):
    """Attach the browser's AppState to the request, creating a session if needed"""
    app_settings = request.app[SETTINGS_KEY]
    store = request.app[SESSIONS_KEY]

    token = request.cookies.get(app_settings.session_cookie_name)
    state = store.get(token)
    is_new = state is None
    if is_new:
        token, state = store.create()
        logger.debug(f"[WEB] New session {token[:6]}... ({len(store)} active)")

    request[APP_STATE] = state
    try:
        response = await handler(request)
    except web.HTTPException as exc:
        if not is_new:
            raise
        # Error responses still hand the new session to the browser
        response = web.Response(status=exc.status, reason=exc.reason, text=exc.text, headers=exc.headers)

    if is_new:
        response.set_cookie(
            app_settings.session_cookie_name,
            token,
            httponly=True,
            samesite="Lax",
            secure=app_settings.session_cookie_secure,
        )
    return response


def create_app(
    services: Services,
    app_settings: Optional[Settings] = None,
    sessions: Optional[SessionStore] = None,
) -> web.Application:
    app = web.Application(middlewares=[session_middleware])
    app[SERVICES_KEY] = services
    app[SETTINGS_KEY] = app_settings or default_settings
    app[SESSIONS_KEY] = sessions or SessionStore()
    for table in routes:
        app.router.add_routes(table)
    return app
