# 📄 File: garden_calendar/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# The front door of the service: its versioned web API.
# 🧪 Purpose (Technical Summary):
# API package.
