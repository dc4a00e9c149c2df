# 📄 File: garden_calendar/modules/planting_calendar/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The heart of the planting calendar: its data, rules and storage contracts.
# 🧪 Purpose (Technical Summary):
# Domain layer package (models, services, repositories, events).
