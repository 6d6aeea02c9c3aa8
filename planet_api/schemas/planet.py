from pydantic import BaseModel, ConfigDict
from pydantic import Field


class PlanetCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, examples=["Tatooine"], description="Planet name, unique")
    climate: str = Field(..., min_length=1, max_length=255, examples=["Arid"], description="Planet climate")
    terrain: str = Field(..., min_length=1, max_length=255, examples=["Desert"], description="Planet terrain")

class PlanetResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    
    id: int = Field(..., examples=[1], description="Database ID of the planet")
    name: str = Field(..., examples=["Tatooine"], description="Planet name")
    climate: str = Field(..., examples=["Arid"], description="Planet climate")
    terrain: str = Field(..., examples=["Desert"], description="Planet terrain")
