# app/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from app.routes import vehicle_router
from app.database import connect_to_mongo, close_mongo_connection, init_db
from app.config import get_settings
from app.utils.exceptions import register_exception_handlers

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup; a missing VIN index aborts it
    await connect_to_mongo()
    try:
        await init_db()
        yield
    finally:
        # Shutdown
        await close_mongo_connection()

app = FastAPI(title="Car Supermarket Inventory", lifespan=lifespan)

register_exception_handlers(app)

app.include_router(vehicle_router, prefix=settings.API_PREFIX, tags=["cars"])

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD
    )
