"""
Geometry for the spinning pentagram decorating the form. Purely cosmetic.
"""

### stdlib imports
import math

Point = tuple[float, float]

_golden_angle = math.pi * 2 / 5
_base_rotation = math.pi / 2  # first vertex points straight down
_star_order = (0, 2, 4, 1, 3)


def pentagram_points(
    center_x: float, center_y: float, size: float, rotation: float = 0.0
) -> list[Point]:
    """
    Vertices of an inverted five-pointed star, in drawing order.

    Connecting the returned points in sequence (and closing the path back to
    the first) traces the star with its crossing lines.
    """
    vertices = []
    for i in range(5):
        angle = i * _golden_angle + _base_rotation + rotation
        vertices.append(
            (
                center_x + size * math.cos(angle),
                center_y + size * math.sin(angle),
            )
        )
    return [vertices[i] for i in _star_order]


def circle_points(
    center_x: float, center_y: float, size: float, segments: int = 100
) -> list[Point]:
    """Closed polyline approximating the circle around the star."""
    return [
        (
            center_x + size * math.cos(2 * math.pi * i / segments),
            center_y + size * math.sin(2 * math.pi * i / segments),
        )
        for i in range(segments + 1)
    ]


def flatten(points: list[Point]) -> list[float]:
    """Flatten `[(x, y), ...]` into `[x, y, ...]` as Tk canvases expect."""
    return [coordinate for point in points for coordinate in point]
