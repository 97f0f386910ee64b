import logging
from typing import List
from urllib.parse import quote

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from app.database import VehicleStore, get_vehicle_store
from app.models.vehicle import VehicleModel
from app.schemas.vehicle import VehicleCreate, VehicleOut
from app.utils.exceptions import ERROR_MESSAGES, ErrorKind, StorageError
from app.utils.response import PrettyJSONResponse, error_response

logger = logging.getLogger(__name__)

router = APIRouter()

def storage_error_response(exc: StorageError) -> JSONResponse:
    """Translate a store failure into its HTTP response, logging server faults"""
    if exc.kind is ErrorKind.UNAVAILABLE:
        logger.error("%s: %s", exc.message, exc.cause)
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(ERROR_MESSAGES[exc.kind]),
    )

@router.get("/cars", response_model=List[VehicleOut])
async def get_cars(store: VehicleStore = Depends(get_vehicle_store)):
    try:
        cars = await store.find_all()
    except StorageError as e:
        return storage_error_response(e)

    return PrettyJSONResponse(
        content=[VehicleOut.model_validate(car, from_attributes=True).model_dump() for car in cars]
    )

@router.post("/cars", status_code=201)
async def add_car(
    car: VehicleCreate,
    request: Request,
    store: VehicleStore = Depends(get_vehicle_store),
):
    try:
        await store.insert(VehicleModel(**car.model_dump()))
    except StorageError as e:
        return storage_error_response(e)

    # Header values must be latin-1
    return Response(
        status_code=201,
        headers={"Location": f"{request.url.path}/{quote(car.vin, safe='')}"},
        media_type="application/json",
    )

@router.api_route("/cars/", methods=["GET", "DELETE"], include_in_schema=False)
async def car_without_vin():
    return storage_error_response(StorageError(ErrorKind.NOT_FOUND, "Empty VIN"))

@router.get("/cars/{vin}", response_model=VehicleOut)
async def get_car(vin: str, store: VehicleStore = Depends(get_vehicle_store)):
    try:
        car = await store.find_by_vin(vin)
    except StorageError as e:
        return storage_error_response(e)

    return PrettyJSONResponse(
        content=VehicleOut.model_validate(car, from_attributes=True).model_dump()
    )

@router.delete("/cars/{vin}", status_code=204)
async def delete_car(vin: str, store: VehicleStore = Depends(get_vehicle_store)):
    try:
        await store.delete_by_vin(vin)
    except StorageError as e:
        return storage_error_response(e)

    return Response(status_code=204)
