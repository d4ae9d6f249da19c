from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, status

from api.deps import get_airplane_service, guard_service
from schemas.airplane import AirplaneCreate, AirplaneQuery, AirplaneRead
from schemas.common import MessageResponse
from services import AirplaneService

router = APIRouter()


@router.post("", response_model=AirplaneRead, status_code=status.HTTP_201_CREATED)
async def create_airplane(
    payload: AirplaneCreate,
    service: AirplaneService = Depends(get_airplane_service),
) -> AirplaneRead:
    return await guard_service(service.create(payload))


@router.get("", response_model=List[AirplaneRead])
async def list_airplanes(
    name: Optional[str] = None,
    model: Optional[str] = None,
    min_passengers: Optional[str] = None,
    service: AirplaneService = Depends(get_airplane_service),
) -> List[AirplaneRead]:
    query = AirplaneQuery(name=name, model=model, min_passengers=min_passengers)
    return await guard_service(service.search(service.criteria_for(query)))


@router.get("/{airplane_id}", response_model=AirplaneRead)
async def get_airplane(
    airplane_id: str,
    service: AirplaneService = Depends(get_airplane_service),
) -> AirplaneRead:
    return await guard_service(service.get(airplane_id))


@router.put("/{airplane_id}", response_model=AirplaneRead)
async def update_airplane(
    airplane_id: str,
    payload: AirplaneCreate,
    service: AirplaneService = Depends(get_airplane_service),
) -> AirplaneRead:
    return await guard_service(service.update(airplane_id, payload))


@router.delete("/{airplane_id}", response_model=MessageResponse)
async def delete_airplane(
    airplane_id: str,
    service: AirplaneService = Depends(get_airplane_service),
) -> MessageResponse:
    await guard_service(service.delete(airplane_id))
    return MessageResponse(message=f"Airplane {airplane_id} deleted")
