"""
ViewportState - Pan/zoom transform between screen and diagram coordinates.

Independent of the entity data. The renderer reads it to draw, and the
input layer uses it to map pointer positions into diagram space.
"""

from dataclasses import dataclass

from settings.constants import ZOOM_FACTOR, ZOOM_MAX, ZOOM_MIN


def clamp_zoom(scale: float) -> float:
    """Clamp a zoom factor to [ZOOM_MIN, ZOOM_MAX]."""
    return max(ZOOM_MIN, min(ZOOM_MAX, scale))


@dataclass
class ViewportState:
    """
    Stage transform: ``screen = diagram * scale + offset``.

    Scale is clamped on every update; the pan offset is unbounded.
    """

    scale: float = 1.0
    x: float = 0.0
    y: float = 0.0

    def __post_init__(self):
        self.scale = clamp_zoom(self.scale)

    def set_scale(self, scale: float) -> float:
        """Set the zoom factor, clamped. Returns the value actually applied."""
        self.scale = clamp_zoom(scale)
        return self.scale

    def set_position(self, x: float, y: float) -> None:
        """Set the pan offset."""
        self.x = x
        self.y = y

    def screen_to_diagram(self, screen_x: float, screen_y: float) -> tuple[float, float]:
        """Map a pointer position to diagram coordinates."""
        return ((screen_x - self.x) / self.scale, (screen_y - self.y) / self.scale)

    def diagram_to_screen(self, x: float, y: float) -> tuple[float, float]:
        """Map diagram coordinates to a screen position."""
        return (x * self.scale + self.x, y * self.scale + self.y)

    def zoom_at(self, pointer_x: float, pointer_y: float, zoom_in: bool, factor: float = ZOOM_FACTOR) -> float:
        """
        Zoom one step keeping the diagram point under the pointer fixed.

        Returns the new (clamped) scale.
        """
        anchor_x, anchor_y = self.screen_to_diagram(pointer_x, pointer_y)
        new_scale = self.set_scale(self.scale * factor if zoom_in else self.scale / factor)
        self.set_position(pointer_x - anchor_x * new_scale, pointer_y - anchor_y * new_scale)
        return new_scale

    def reset(self) -> None:
        """Return to 100% zoom with no pan."""
        self.scale = 1.0
        self.x = 0.0
        self.y = 0.0

    @property
    def zoom_percent(self) -> int:
        return round(self.scale * 100)
