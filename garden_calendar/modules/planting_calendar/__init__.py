# 📄 File: garden_calendar/modules/planting_calendar/__init__.py
# 🧭 Purpose (Layman Explanation):
# Everything about deciding when to plant and showing it on a calendar.
# 🧪 Purpose (Technical Summary):
# Planting calendar module: domain, application, infrastructure and presentation layers.
# 🔗 Dependencies:
# garden_calendar.shared
# 🔄 Connected Modules / Calls From:
# garden_calendar.api.v1.router

"""
Planting Calendar Module

Domain:
- PlantingDateResolver: MM-DD recommendation -> next concrete planting date
- MonthEventAggregator: month filtering, day markers, agenda sections

Application:
- Add plant to calendar, remove entry, generate plant profile (commands)
- Month view, agenda, single entry, plant search (queries)
"""
