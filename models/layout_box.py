"""Pixel-Position eines Termins / Slots im Stundenraster."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LayoutBox:
    """Vertikale Position relativ zum Raster-Ursprung (Pixel)."""

    # Abstand von oben, nie negativ
    top: float
    # Höhe, nie kleiner als minimum_height_pixels der Ansicht
    height: float

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def __str__(self) -> str:
        return f"top={self.top:.1f}px height={self.height:.1f}px"
