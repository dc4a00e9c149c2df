# 📄 File: garden_calendar/shared/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Marks the 'shared' folder as the toolbox every part of the Garden Calendar can use,
# like settings, error types, logging and database access.
#
# 🧪 Purpose (Technical Summary):
# Shared kernel package: configuration, exception hierarchy, logging/date utilities,
# observer-style events and infrastructure (database, external HTTP).
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - All application modules importing shared utilities
