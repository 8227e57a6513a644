"""Configuration management."""

import json
from pathlib import Path

from pydantic import BaseModel, Field, field_validator


class StyleConfig(BaseModel):
    stroke: str = "#000000"
    stroke_width: float = Field(default=1.0, gt=0)
    padding: float = Field(default=0.1, ge=0)  # fraction of the drawing extent
    min_extent: float = Field(default=10.0, gt=0)
    precision: int = Field(default=3, ge=0, le=10)

    @field_validator("stroke")
    @classmethod
    def _hex_color(cls, v: str) -> str:
        digits = v[1:] if v.startswith("#") else ""
        if len(digits) not in (3, 6) or any(c not in "0123456789abcdefABCDEF" for c in digits):
            raise ValueError(f"stroke must be a #rgb or #rrggbb color, got {v!r}")
        return v

    def stroke_rgb(self) -> tuple[float, float, float]:
        """Stroke color as 0..1 floats."""
        digits = self.stroke[1:]
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        return tuple(int(digits[i : i + 2], 16) / 255 for i in (0, 2, 4))


class WorkAreaConfig(BaseModel):
    left: float = -420.5
    right: float = 420.5
    top: float = 594.5
    bottom: float = -594.5


class PenConfig(BaseModel):
    up_angle: int = Field(default=90, ge=0, le=180)
    down_angle: int = Field(default=40, ge=0, le=180)
    travel_speed: int = Field(default=1000, gt=0)
    draw_speed: int = Field(default=500, gt=0)


class Config(BaseModel):
    style: StyleConfig = StyleConfig()
    work_area: WorkAreaConfig = WorkAreaConfig()
    pen: PenConfig = PenConfig()

    @classmethod
    def load(cls, path: str | Path = "turtlepath.json") -> "Config":
        with open(path) as f:
            return cls(**json.load(f))

    def save(self, path: str | Path = "turtlepath.json"):
        with open(path, "w") as f:
            json.dump(self.model_dump(), f, indent=4)
