from .planet import PlanetCreate, PlanetResponse

__all__ = ["PlanetCreate", "PlanetResponse"]
