from pydantic import BaseModel, Field, field_validator
from typing import List, Literal, Optional

from app.models.vehicle import Vehicle, VehicleFeature


# ============================================================================
# Fleet Manager Schemas (matching the admin vehicle dialog)
# ============================================================================

class VehicleFormSchema(BaseModel):
    """Vehicle create/edit form. `images` holds the URLs uploaded so far, in order."""
    name: str = Field(..., min_length=1, max_length=200, description="Vehicle name")
    description: str = Field("", max_length=2000, description="Marketing description")
    price: float = Field(..., ge=0, description="Price per hour")
    is_available: bool = Field(True, description="Shown on the public site")
    features: List[VehicleFeature] = Field(default_factory=list, description="Selected features")
    images: List[str] = Field(default_factory=list, description="Uploaded image URLs")

    @field_validator("features")
    @classmethod
    def unique_features(cls, features: List[VehicleFeature]) -> List[VehicleFeature]:
        seen = []
        for feature in features:
            if feature not in seen:
                seen.append(feature)
        return seen

    def to_row(self) -> dict:
        """Map the form to a `vehicles` row. The first image is the thumbnail."""
        return {
            "name": self.name,
            "description": self.description,
            "price_per_hour": self.price,
            "image_url": self.images[0] if self.images else "",
            "images": list(self.images),
            "is_available": self.is_available,
            "features": [feature.value for feature in self.features],
        }

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Mercedes S-Class",
                "description": "The pinnacle of luxury and comfort for your Swiss journeys.",
                "price": 120,
                "is_available": True,
                "features": ["Premium Audio", "AC", "Automatic"],
                "images": ["https://i.ibb.co/abc123/s-class.jpg"]
            }
        }


# ============================================================================
# Catalog Schemas
# ============================================================================

class CatalogResponseSchema(BaseModel):
    """Public catalog. `source` tells store data apart from the built-in fallback."""
    vehicles: List[Vehicle]
    source: Literal["store", "fallback"]
    storeError: Optional[str] = Field(None, description="Store failure behind a fallback, if any")


# ============================================================================
# Image Upload Schemas
# ============================================================================

class ImageUploadResponseSchema(BaseModel):
    """Outcome of a multi-file upload"""
    urls: List[str]
    uploaded: int
    failed: int
