# 📄 File: garden_calendar/modules/planting_calendar/presentation/api/v1/plants.py
# 🧭 Purpose (Layman Explanation):
# Web addresses for finding plants in the catalog and for asking the AI to describe a new one.
# 🧪 Purpose (Technical Summary):
# FastAPI router for catalog prefix search and LLM profile generation.
# 🔗 Dependencies:
# FastAPI, application commands/queries, presentation dependencies and schemas
# 🔄 Connected Modules / Calls From:
# garden_calendar.api.v1.router

import logging

from fastapi import APIRouter, Depends, Query

from ....application.commands.generate_plant_profile import GeneratePlantProfileCommand
from ....application.handlers.command_handlers import GeneratePlantProfileCommandHandler
from ....application.handlers.query_handlers import SearchPlantsQueryHandler
from ....application.queries.search_plants import SearchPlantsQuery
from ...dependencies import get_generate_profile_handler, get_search_plants_handler
from ..schemas.plant_schemas import (
    CatalogPlantResponse,
    GeneratePlantProfileRequest,
    PlantSearchResponse,
)

logger = logging.getLogger(__name__)

plants_router = APIRouter()


@plants_router.get(
    "/search",
    response_model=PlantSearchResponse,
    summary="Search the plant catalog",
    description="Plants whose name starts with the search term",
)
async def search_plants(
    q: str = Query("", max_length=100, description="Name prefix"),
    limit: int = Query(20, ge=1, le=100),
    handler: SearchPlantsQueryHandler = Depends(get_search_plants_handler),
) -> PlantSearchResponse:
    plants = await handler.handle(SearchPlantsQuery(term=q, limit=limit))
    return PlantSearchResponse(
        query=q,
        count=len(plants),
        results=[CatalogPlantResponse.from_domain(plant) for plant in plants],
    )


@plants_router.post(
    "/generate",
    response_model=CatalogPlantResponse,
    summary="Generate a plant profile",
    description="Describe a plant with the language model and add it to the catalog",
    responses={
        404: {"description": "Not a plant that can be grown in a garden"},
        502: {"description": "Language model service error"},
    },
)
async def generate_plant_profile(
    request: GeneratePlantProfileRequest,
    handler: GeneratePlantProfileCommandHandler = Depends(get_generate_profile_handler),
) -> CatalogPlantResponse:
    plant = await handler.handle(GeneratePlantProfileCommand(
        plant_name=request.plant_name,
        user_id=request.user_id,
    ))
    return CatalogPlantResponse.from_domain(plant)
