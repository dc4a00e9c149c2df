# 📄 File: garden_calendar/modules/planting_calendar/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# How the outside world talks to the planting calendar.
# 🧪 Purpose (Technical Summary):
# Presentation layer package (FastAPI routers, schemas, dependency wiring).
