# 📄 File: garden_calendar/modules/planting_calendar/application/queries/search_plants.py
# 🧭 Purpose (Layman Explanation):
# "Show me plants whose name starts with what I typed."
# 🧪 Purpose (Technical Summary):
# CQRS query for catalog prefix search.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# SearchPlantsQueryHandler, plants API endpoint

from pydantic import BaseModel, ConfigDict, Field


class SearchPlantsQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    term: str = Field("", max_length=100)
    limit: int = Field(20, ge=1, le=100)
