# app/models/vehicle.py
from typing import Any, Dict

from pydantic import BaseModel

class VehicleModel(BaseModel):
    """A vehicle as stored in the cars collection."""

    manufacturer: str
    model: str
    vin: str
    regno: str

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "VehicleModel":
        return cls(**{k: v for k, v in document.items() if k != "_id"})

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump()
