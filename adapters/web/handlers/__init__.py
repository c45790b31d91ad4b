from adapters.web.handlers import navigation, registration, auth, admin

# Route tables in registration order
routes = [
    navigation.routes,
    registration.routes,
    auth.routes,
    admin.routes,
]

__all__ = ["routes"]
