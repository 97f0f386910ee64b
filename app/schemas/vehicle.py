# app/schemas/vehicle.py
from pydantic import BaseModel, ConfigDict, Field

class VehicleBase(BaseModel):
    manufacturer: str
    model: str
    vin: str = Field(..., min_length=1, description="Vehicle Identification Number")
    regno: str = Field(..., description="Registration number")

class VehicleCreate(VehicleBase):
    pass

class VehicleOut(VehicleBase):
    model_config = ConfigDict(from_attributes=True)
