# 📄 File: garden_calendar/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Version 1 of the Garden Calendar web API.
# 🧪 Purpose (Technical Summary):
# API v1 package.

API_VERSION = "v1"
API_PREFIX = "/api/v1"
