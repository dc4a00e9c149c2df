# 📄 File: garden_calendar/modules/planting_calendar/application/handlers/command_handlers.py
# 🧭 Purpose (Layman Explanation):
# The workers that carry out calendar actions: working out a planting date and saving it,
# removing a plant from the calendar, and creating a new plant description.
# 🧪 Purpose (Technical Summary):
# CQRS command handlers orchestrating the PlantingDateResolver, repositories, the profile
# generator and the CalendarChangeNotifier. Observers are told only after a write succeeds.
# 🔗 Dependencies:
# - Application commands, domain services/repositories/events
# - garden_calendar.shared (exceptions, logging, clock)
# 🔄 Connected Modules / Calls From:
# - garden_calendar.modules.planting_calendar.presentation.api.v1 (endpoints invoke handlers)
# - Presentation dependencies (handler construction)

__all__ = [
    "AddPlantToCalendarCommandHandler",
    "RemoveCalendarEntryCommandHandler",
    "GeneratePlantProfileCommandHandler",
]

from typing import Optional

from garden_calendar.shared.core.exceptions import (
    CalendarEntryNotFoundError,
    ExternalAPIError,
    PlantNotFoundError,
    ValidationError,
)
from garden_calendar.shared.utils.dates import Clock, system_clock
from garden_calendar.shared.utils.logging import get_logger

from ..commands.add_plant_to_calendar import AddPlantToCalendarCommand
from ..commands.generate_plant_profile import GeneratePlantProfileCommand
from ..commands.remove_calendar_entry import RemoveCalendarEntryCommand
from ...domain.events.calendar_events import (
    CalendarChangeNotifier,
    CalendarEntryRemoved,
    PlantAddedToCalendar,
)
from ...domain.models.calendar_entry import CalendarEntry
from ...domain.models.plant import CatalogPlant, normalize_plant_name
from ...domain.repositories.calendar_entry_repository import CalendarEntryRepository
from ...domain.repositories.plant_repository import PlantRepository
from ...domain.services.plant_profile_generator import PlantProfileGenerator
from ...domain.services.planting_date_resolver import PlantingDateResolver

logger = get_logger(__name__)


class AddPlantToCalendarCommandHandler:
    """
    Handles adding a plant to a calendar: resolve the date, upsert and commit the entry, notify.

    A failed resolution raises before anything is written.
    """

    def __init__(
        self,
        resolver: PlantingDateResolver,
        entry_repository: CalendarEntryRepository,
        notifier: Optional[CalendarChangeNotifier] = None,
        clock: Clock = system_clock,
    ):
        self._resolver = resolver
        self._entry_repository = entry_repository
        self._notifier = notifier
        self._clock = clock

    async def handle(self, command: AddPlantToCalendarCommand) -> CalendarEntry:
        logger.info(
            f"Adding {command.plant.display_name} to calendar",
            user_id=command.user_id,
            plant_id=command.plant.id,
        )

        planting_date = await self._resolver.resolve_planting_date(
            command.plant, command.location, self._clock()
        )
        entry = CalendarEntry.for_plant(command.user_id, command.plant, planting_date)
        stored = await self._entry_repository.upsert(entry)
        await self._entry_repository.commit()

        logger.log_business_event(
            "calendar.plant_added",
            f"Planting of {stored.plant.display_name} scheduled for {stored.date}",
            entity_id=stored.id,
            entity_type="calendar_entry",
            extra={"user_id": stored.user_id, "planting_date": stored.date},
        )

        if self._notifier is not None:
            await self._notifier.notify(PlantAddedToCalendar(
                user_id=stored.user_id,
                entry_id=stored.id,
                plant_name=stored.plant.display_name,
                planting_date=stored.date,
            ))
        return stored


class RemoveCalendarEntryCommandHandler:
    """Handles removing one entry from a user's calendar."""

    def __init__(
        self,
        entry_repository: CalendarEntryRepository,
        notifier: Optional[CalendarChangeNotifier] = None,
    ):
        self._entry_repository = entry_repository
        self._notifier = notifier

    async def handle(self, command: RemoveCalendarEntryCommand) -> None:
        deleted = await self._entry_repository.delete(command.user_id, command.entry_id)
        if not deleted:
            raise CalendarEntryNotFoundError(command.user_id, command.entry_id)
        await self._entry_repository.commit()

        logger.log_business_event(
            "calendar.entry_removed",
            f"Calendar entry {command.entry_id} removed",
            entity_id=command.entry_id,
            entity_type="calendar_entry",
            extra={"user_id": command.user_id},
        )

        if self._notifier is not None:
            await self._notifier.notify(CalendarEntryRemoved(
                user_id=command.user_id,
                entry_id=command.entry_id,
            ))


class GeneratePlantProfileCommandHandler:
    """
    Handles plant profile generation.

    A plant already in the catalog under the same normalized name is returned
    as is. Otherwise the generator writes the profile, then an image is added
    when one can be produced, and the result is saved to the catalog.
    """

    def __init__(
        self,
        generator: PlantProfileGenerator,
        plant_repository: PlantRepository,
    ):
        self._generator = generator
        self._plant_repository = plant_repository

    async def handle(self, command: GeneratePlantProfileCommand) -> CatalogPlant:
        normalized_name = normalize_plant_name(command.plant_name)
        if not normalized_name:
            raise ValidationError("Plant name cannot be blank", field="plant_name")

        existing = await self._plant_repository.get_by_normalized_name(normalized_name)
        if existing is not None:
            logger.info(f"Plant '{normalized_name}' already in catalog", plant_id=existing.id)
            return existing

        profile = await self._generator.generate_profile(command.plant_name)
        if profile is None:
            raise PlantNotFoundError(command.plant_name)

        try:
            image_url = await self._generator.generate_image_url(profile)
        except ExternalAPIError as e:
            logger.warning(
                f"Image generation failed for {profile.display_name}, keeping profile without image",
                plant_id=profile.id,
                error_code=e.error_code,
            )
            image_url = ""

        plant = CatalogPlant.from_profile(
            profile.with_image_url(image_url),
            user_query=command.plant_name,
            created_by=command.user_id,
        )
        stored = await self._plant_repository.save(plant)

        logger.log_business_event(
            "plant.generated",
            f"Generated plant profile for {stored.display_name}",
            entity_id=stored.id,
            entity_type="plant",
            extra={"has_image": bool(stored.image_url)},
        )
        return stored
