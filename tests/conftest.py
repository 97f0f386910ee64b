from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient
from pymongo.errors import ServerSelectionTimeoutError

from app.database import VehicleStore, get_vehicle_store
from app.main import app

FOCUS = {
    "manufacturer": "Ford",
    "model": "Focus",
    "vin": "1FAFP34P06W102341",
    "regno": "AB12CDE",
}


@pytest.fixture
def cars_collection():
    return AsyncMongoMockClient()["carsupermarket"]["cars"]


@pytest_asyncio.fixture
async def store(cars_collection):
    store = VehicleStore(cars_collection)
    await store.ensure_unique_index()
    return store


@pytest.fixture
def broken_collection():
    error = ServerSelectionTimeoutError("mongo:27017: connection refused")
    collection = MagicMock()
    collection.name = "cars"
    collection.find.return_value.to_list = AsyncMock(side_effect=error)
    collection.find_one = AsyncMock(side_effect=error)
    collection.insert_one = AsyncMock(side_effect=error)
    collection.delete_one = AsyncMock(side_effect=error)
    return collection


@pytest_asyncio.fixture
async def client(store):
    app.dependency_overrides[get_vehicle_store] = lambda: store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def broken_client(broken_collection):
    app.dependency_overrides[get_vehicle_store] = lambda: VehicleStore(broken_collection)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
