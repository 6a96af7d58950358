"""
Settings for a single diagram rebuild.

These are the draw-space size, the area feature toggles and the value-axis
line layout. A rebuild never mutates them.
"""

from pydantic import BaseModel, Field


class DiagramSettings(BaseModel):
    """Draw-space configuration for one climate diagram."""

    width: float = Field(default=400.0, gt=0, description="Width of the chart area")
    height: float = Field(default=600.0, gt=0, description="Height of the chart area")

    # Area toggles
    draw_full: bool = Field(default=True, description="Emit humid/dry areas for months without a crossing")
    draw_partial: bool = Field(default=True, description="Emit areas for months where the curves cross")

    # Value axis lines
    axis_line_offset: float = Field(default=5.0, ge=0, description="Horizontal inset of value axis lines")
    zero_axis_width: float = Field(default=1.5, gt=0, description="Line width of the zero line")
    axis_width: float = Field(default=0.7, gt=0, description="Line width of the other value axis lines")

    @classmethod
    def from_settings(cls, settings, **overrides) -> "DiagramSettings":
        """Build diagram settings from the application settings."""
        values = {
            "width": settings.draw_width,
            "height": settings.draw_height,
            "draw_full": settings.draw_full,
            "draw_partial": settings.draw_partial,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
