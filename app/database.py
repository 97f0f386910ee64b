# app/database.py
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, List

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pydantic import ValidationError
from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError, PyMongoError

from app.config import get_settings
from app.models.vehicle import VehicleModel
from app.utils.exceptions import ErrorKind, StorageError

settings = get_settings()
logger = logging.getLogger(__name__)

VIN_INDEX_NAME = "vin_unique"


class VehicleStore:
    """Access to the cars collection, keyed by VIN."""

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    @asynccontextmanager
    async def _checkout(self, operation: str) -> AsyncIterator[AsyncIOMotorCollection]:
        # The driver returns the pooled socket once each call completes.
        try:
            yield self.collection
        except DuplicateKeyError as e:
            raise StorageError(ErrorKind.DUPLICATE_KEY, f"Failed {operation}: duplicate VIN", e) from e
        except PyMongoError as e:
            raise StorageError(ErrorKind.UNAVAILABLE, f"Failed {operation}", e) from e
        except ValidationError as e:
            raise StorageError(ErrorKind.UNAVAILABLE, f"Failed {operation}: malformed document", e) from e

    async def ensure_unique_index(self) -> None:
        try:
            await self.collection.create_index(
                [("vin", ASCENDING)],
                name=VIN_INDEX_NAME,
                unique=True,
                sparse=True,
                background=True,
            )
        except PyMongoError as e:
            logger.critical("Failed to create unique VIN index: %s", e)
            raise
        logger.info("Ensured unique index %r on %s", VIN_INDEX_NAME, self.collection.name)

    async def find_all(self) -> List[VehicleModel]:
        async with self._checkout("get all cars") as collection:
            documents = await collection.find({}).to_list(length=None)
            return [VehicleModel.from_document(document) for document in documents]

    async def find_by_vin(self, vin: str) -> VehicleModel:
        async with self._checkout("find car") as collection:
            document = await collection.find_one({"vin": vin})
            if document is not None:
                return VehicleModel.from_document(document)
        raise StorageError(ErrorKind.NOT_FOUND, f"No car found with VIN: {vin}")

    async def insert(self, vehicle: VehicleModel) -> None:
        async with self._checkout("insert car") as collection:
            await collection.insert_one(vehicle.to_document())

    async def delete_by_vin(self, vin: str) -> None:
        async with self._checkout("delete car") as collection:
            result = await collection.delete_one({"vin": vin})
        if result.deleted_count == 0:
            raise StorageError(ErrorKind.NOT_FOUND, f"No car found with VIN: {vin}")


class Database:
    client: AsyncIOMotorClient = None
    store: VehicleStore = None

db = Database()

async def connect_to_mongo():
    db.client = AsyncIOMotorClient(settings.MONGODB_URI)
    collection = db.client[settings.MONGODB_DB_NAME][settings.MONGODB_COLLECTION]
    db.store = VehicleStore(collection)
    logger.info("Connected to MongoDB: %s.%s", settings.MONGODB_DB_NAME, settings.MONGODB_COLLECTION)

async def close_mongo_connection():
    if db.client:
        db.client.close()
        db.client = None
        db.store = None
        logger.info("Closed MongoDB connection")

async def get_vehicle_store() -> VehicleStore:
    return db.store

async def init_db():
    if not db.client:
        await connect_to_mongo()
    await db.store.ensure_unique_index()
