# 📄 File: garden_calendar/modules/__init__.py
# 🧭 Purpose (Layman Explanation):
# The feature areas of the Garden Calendar service.
# 🧪 Purpose (Technical Summary):
# Modular monolith feature modules package.
