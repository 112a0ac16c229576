"""Collection names and defaults.

Note: Keep store paths here so every repository addresses the same tree.
"""

WORKERS = "workers"
CREDENTIALS = "logincredentials"
PROJECTS = "projects"
ATTENDANCE = "attendance"

DEFAULT_ADMIN_USERNAME = "admin"
DEFAULT_ADMIN_PROFILE = {
    "fullName": "Default Admin",
    "contactNumber": "+0000000000",
    "dob": "1990-01-01",
    "doj": "1990-01-01",
    "address": "Admin Office",
}

DEFAULT_API_PREFIX = "/api"
DEFAULT_FANOUT_WORKERS = 8
