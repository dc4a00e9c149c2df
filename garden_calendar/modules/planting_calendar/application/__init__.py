# 📄 File: garden_calendar/modules/planting_calendar/application/__init__.py
# 🧭 Purpose (Layman Explanation):
# The use cases of the planting calendar, tying its rules to storage and outside services.
# 🧪 Purpose (Technical Summary):
# Application layer package (CQRS commands, queries and handlers).
