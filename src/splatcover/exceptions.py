"""Exception hierarchy for Splatcover."""


class SplatCoverError(Exception):
    """Base exception for all Splatcover errors."""

    pass


class GeometryError(SplatCoverError):
    """Errors related to circle geometry."""

    pass


class InvalidRadiusError(GeometryError, ValueError):
    """Circle radius is not a positive finite number."""

    def __init__(self, radius: float) -> None:
        self.radius = radius
        super().__init__(f"Invalid circle radius {radius!r}: must be > 0")


class InvalidCoordinateError(GeometryError, ValueError):
    """Circle centre coordinate is missing or not a finite number."""

    def __init__(self, name: str, value: object, reason: str = "must be finite") -> None:
        self.name = name
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid circle coordinate {name}={value!r}: {reason}")


class SamplingError(SplatCoverError):
    """Errors related to grid sampling."""

    pass


class InvalidResolutionError(SamplingError, ValueError):
    """Grid resolution is not an integer >= 1."""

    def __init__(self, resolution: object) -> None:
        self.resolution = resolution
        super().__init__(
            f"Invalid grid resolution {resolution!r}: must be an integer >= 1"
        )
