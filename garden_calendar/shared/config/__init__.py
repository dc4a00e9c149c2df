# 📄 File: garden_calendar/shared/config/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Makes the settings easy to import from one place.
#
# 🧪 Purpose (Technical Summary):
# Configuration package exports.

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
