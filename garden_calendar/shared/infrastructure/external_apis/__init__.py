# 📄 File: garden_calendar/shared/infrastructure/external_apis/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Tools for calling outside web services.
#
# 🧪 Purpose (Technical Summary):
# External API package exports.

from .api_client import APIClient, create_api_client

__all__ = ["APIClient", "create_api_client"]
