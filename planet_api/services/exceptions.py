"""Planet domain errors.

Routes translate these into HTTP status codes; absence (not found) is
returned as ``None`` and is not an error.
"""


class PlanetError(Exception):
    """Base class for planet domain errors."""


class PlanetValidationError(PlanetError):
    """A required planet field is missing or empty."""

    def __init__(self, fields: list[str]):
        self.fields = fields
        super().__init__(f"Missing or empty required fields: {', '.join(fields)}")


class PlanetAlreadyExistsError(PlanetError):
    """Another planet already uses this name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Planet '{name}' already exists")
