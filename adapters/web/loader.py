"""
Web loader - wires repositories and services together.
"""

from dataclasses import dataclass
from aiohttp import web

from core.interfaces.repositories import IEventRepository, IApplicationRepository
from core.interfaces.auth import IAuthGateway
from core.services import EventService, RegistrationService, AdminService, AuthService


@dataclass
class Services:
    events: EventService
    registration: RegistrationService
    admin: AdminService
    auth: AuthService


SERVICES_KEY = web.AppKey("services", Services)


def build_services(
    event_repo: IEventRepository,
    application_repo: IApplicationRepository,
    auth_gateway: IAuthGateway,
) -> Services:
    return Services(
        events=EventService(event_repo=event_repo),
        registration=RegistrationService(event_repo=event_repo, application_repo=application_repo),
        admin=AdminService(event_repo=event_repo, application_repo=application_repo),
        auth=AuthService(auth_gateway=auth_gateway),
    )


def build_supabase_services() -> Services:
    """Production wiring: every repository talks to Supabase"""
    from infrastructure.database import (
        SupabaseEventRepository,
        SupabaseApplicationRepository,
        SupabaseAuthGateway,
    )

    return build_services(
        event_repo=SupabaseEventRepository(),
        application_repo=SupabaseApplicationRepository(),
        auth_gateway=SupabaseAuthGateway(),
    )
