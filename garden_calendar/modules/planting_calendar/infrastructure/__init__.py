# 📄 File: garden_calendar/modules/planting_calendar/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# The planting calendar's connections to the database and to the AI service.
# 🧪 Purpose (Technical Summary):
# Infrastructure layer package (SQLAlchemy repositories, OpenAI adapters).
