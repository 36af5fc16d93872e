from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

Coord = tuple[int, int] | tuple[float, float]


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False


# ----------------- ENVIRONMENT ---------------------


class ObstacleModel(BaseModel):
    """Axis-aligned rectangle; y grows downwards."""

    model_config = ConfigDict(extra="forbid")
    top_left: Coord
    bottom_right: Coord

    @model_validator(mode="after")
    def _check_corners(self):
        (x0, y0), (x1, y1) = self.top_left, self.bottom_right
        if x0 > x1 or y0 > y1:
            raise ValueError(
                f"top_left {self.top_left} must not exceed bottom_right {self.bottom_right}"
            )
        return self


# ----------------- ROADMAP ---------------------


class RoadmapModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    k: int = Field(ge=1)
    dim: int = 2  # passed through to consumers
    axis_rule: Literal["literal", "span"] = "literal"
    neighbor_mode: Literal["directed", "union", "intersection"] = "directed"


# ------------------------------------------------------------------


class ScenarioModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    run_id: str = "local"
    log: LogModel = LogModel()
    roadmap: RoadmapModel
    samples: list[Coord] = Field(default_factory=list)
    obstacles: list[ObstacleModel] = Field(default_factory=list)
    n_nodes: int | None = None

    @field_validator("obstacles", mode="before")
    @classmethod
    def _none_to_empty(cls, v):
        # YAML "obstacles:" with no entries means an empty map
        return [] if v is None else v

    @model_validator(mode="after")
    def _check_counts(self):
        if self.n_nodes is not None and self.n_nodes != len(self.samples):
            raise ValueError(f"n_nodes={self.n_nodes} but {len(self.samples)} samples given")
        return self
