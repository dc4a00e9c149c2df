# 📄 File: garden_calendar/modules/planting_calendar/application/commands/__init__.py
# 🧭 Purpose (Layman Explanation):
# All the things a gardener can DO with their planting calendar.
# 🧪 Purpose (Technical Summary):
# CQRS command definitions for planting calendar write operations.

"""
Planting Calendar Commands

- AddPlantToCalendarCommand: resolve a planting date and save the entry
- RemoveCalendarEntryCommand: delete an entry
- GeneratePlantProfileCommand: build a catalog plant with the language model
"""

from .add_plant_to_calendar import AddPlantToCalendarCommand
from .generate_plant_profile import GeneratePlantProfileCommand
from .remove_calendar_entry import RemoveCalendarEntryCommand

__all__ = [
    "AddPlantToCalendarCommand",
    "GeneratePlantProfileCommand",
    "RemoveCalendarEntryCommand",
]
