from __future__ import annotations

from schemas.airplane import AirplaneQuery, AirplaneRead
from services.base import ResourceService
from services.filters import SearchCriteria


class AirplaneService(ResourceService[AirplaneRead]):
    label = "Airplane"
    read_schema = AirplaneRead

    @staticmethod
    def criteria_for(query: AirplaneQuery) -> SearchCriteria:
        return SearchCriteria(
            contains={"name": query.name, "model": query.model},
            at_least={"passenger_capacity": query.min_passengers},
        )
