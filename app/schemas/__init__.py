from .vehicle import VehicleCreate, VehicleOut
