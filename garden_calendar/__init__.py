# 📄 File: garden_calendar/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Tells Python this folder holds our Garden Calendar service: the backend that works out
# when to plant things and shows a month-by-month planting calendar.
#
# 🧪 Purpose (Technical Summary):
# Application package initialization with version info and package metadata
# for the Garden Calendar FastAPI application.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - garden_calendar.main (application entry point)
# - pyproject.toml (package discovery)

"""
Garden Calendar - planting-date recommendations and a planting calendar.

Users pick plants (searched from the catalog or generated by a language model),
the service resolves a recommended planting date for their location, and month
and agenda views are derived from the saved calendar entries.
"""

__version__ = "1.0.0"
__title__ = "Garden Calendar API"
__description__ = "Planting-date resolution and planting calendar service"

__all__ = [
    "__version__",
    "__title__",
    "__description__",
]
