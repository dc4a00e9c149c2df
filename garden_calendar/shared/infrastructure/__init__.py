# 📄 File: garden_calendar/shared/infrastructure/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Holds the plumbing that connects the service to the outside world: the database and other web services.
#
# 🧪 Purpose (Technical Summary):
# Shared infrastructure package (async SQLAlchemy database access, aiohttp API client).
