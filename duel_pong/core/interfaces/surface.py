"""
Surface protocol - defines interface for drawing backends
"""

from typing import Protocol

Color = tuple[int, int, int]


class SurfaceProtocol(Protocol):
    """
    Protocol for drawing surfaces.

    Only primitive shape and text commands are needed, so any backend able to
    draw rectangles, arcs, dashed lines and text can host the game: Pygame,
    a headless recorder for tests, etc.
    """

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None:
        """Erase a rectangular area back to the background"""
        ...

    def fill_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        """Draw a filled rectangle whose top-left corner is (x, y)"""
        ...

    def fill_arc(
        self,
        center_x: float,
        center_y: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        color: Color,
    ) -> None:
        """
        Draw a filled arc (pie slice).

        Args:
            center_x: Center x coordinate
            center_y: Center y coordinate
            radius: Arc radius
            start_angle: Start angle in radians
            end_angle: End angle in radians, a full turn draws a disc
            color: RGB fill color
        """
        ...

    def stroke_dashed_line(
        self,
        start: tuple[float, float],
        end: tuple[float, float],
        dash: tuple[float, float],
        color: Color,
    ) -> None:
        """
        Draw a dashed line segment.

        Args:
            start: Start point
            end: End point
            dash: (drawn length, gap length) pattern
            color: RGB stroke color
        """
        ...

    def fill_text(
        self, text: str, x: float, y: float, size: int, color: Color, align: str = "left"
    ) -> None:
        """
        Draw text whose baseline sits at y.

        Args:
            text: Text to draw
            x: Anchor x coordinate, see align
            y: Baseline y coordinate
            size: Font size in pixels
            color: RGB text color
            align: "left", "center" or "right" relative to x
        """
        ...
