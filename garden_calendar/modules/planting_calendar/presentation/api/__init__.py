# 📄 File: garden_calendar/modules/planting_calendar/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# The planting calendar's web endpoints.
# 🧪 Purpose (Technical Summary):
# API package (versioned routers and schemas).
