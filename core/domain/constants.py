"""
Domain constants - collection names, roles, and other static data.
Centralized here for easy modification.
"""

# Backend collections
EVENTS_TABLE = "events"
APPLICATIONS_TABLE = "applications"
USERS_TABLE = "users"

# Roles
ADMIN_ROLE = "admin"

# Application filter value meaning "every event"
ALL_EVENTS = "all"

# Ordering used by every list view
EVENTS_ORDER_COLUMN = "application_start_date"
APPLICATIONS_ORDER_COLUMN = "created_at"

# Limits
MIN_GROUP_SIZE = 1
MAX_GROUP_SIZE = 20
