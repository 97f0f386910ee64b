#app/routes/__init__.py

from .vehicle import router as vehicle_router
