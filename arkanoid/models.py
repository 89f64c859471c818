"""
Shared primitive data types for Arkanoid.

Immutable geometric types used by the entities, the collision helpers
and the renderer.
"""

from pydantic import BaseModel, ConfigDict, computed_field, field_validator


class Point2D(BaseModel):
    """Immutable 2D point/vector for positions and velocities.

    Attributes:
        x: X coordinate (horizontal)
        y: Y coordinate (vertical, grows downward)

    Examples:
        >>> pos = Point2D(x=480.0, y=656.0)
        >>> vel = Point2D(x=-7.0, y=-7.0)  # Moving up and left
    """
    x: float
    y: float

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Point2D(x={self.x:.2f}, y={self.y:.2f})"


Vector2D = Point2D


class Rectangle(BaseModel):
    """Immutable rectangle defined by top-left corner and dimensions.

    Examples:
        >>> rect = Rectangle(x=7.0, y=70.0, width=84.0, height=28.0)
        >>> rect.center
        Point2D(x=49.0, y=84.0)
    """
    x: float
    y: float
    width: float
    height: float

    model_config = ConfigDict(frozen=True)

    @field_validator('width', 'height')
    @classmethod
    def validate_positive_dimensions(cls, v: float) -> float:
        """Validate dimensions are positive."""
        if v <= 0:
            raise ValueError(f'Rectangle dimensions must be positive, got {v}')
        return v

    @computed_field
    @property
    def center(self) -> Point2D:
        """Center point of the rectangle."""
        return Point2D(x=self.x + self.width / 2, y=self.y + self.height / 2)

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def as_tuple(self) -> tuple:
        """Return (x, y, width, height) for pygame draw calls."""
        return (self.x, self.y, self.width, self.height)

    def __str__(self) -> str:
        return (f"Rectangle(x={self.x:.1f}, y={self.y:.1f}, "
                f"w={self.width:.1f}, h={self.height:.1f})")
