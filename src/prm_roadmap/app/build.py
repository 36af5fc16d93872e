# prm_roadmap/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from prm_roadmap.config.models import ScenarioModel
from prm_roadmap.domain.entities.geometry import Point
from prm_roadmap.domain.roadmap.hooks import NoopHooks
from prm_roadmap.domain.roadmap.roadmap_core import Roadmap
from prm_roadmap.io.build_logging import RoadmapLogging  # JSON logs
from prm_roadmap.io.recorder import MemorySink, Recorder, Sink


@dataclass
class BuiltRoadmap:
    scenario: ScenarioModel
    roadmap: Roadmap
    recorder: Recorder | None


def build(
    cfg: ScenarioModel | Mapping,
    *,
    use_logging: bool = True,
    sinks: tuple[Sink, ...] | None = None,
) -> BuiltRoadmap:
    # 0) Validate config
    model = cfg if isinstance(cfg, ScenarioModel) else ScenarioModel.model_validate(cfg)

    # 1) Hooks & recorder
    recorder = Recorder(*(sinks or (MemorySink(),))) if use_logging else None
    hooks = (
        RoadmapLogging(
            run_id=model.run_id,
            recorder=recorder,
            level=model.log.level,
            debug=model.log.debug,
        )
        if use_logging
        else NoopHooks()
    )

    # 2) Inputs in core types
    samples = [Point(x, y) for x, y in model.samples]
    top_left = [Point(*o.top_left) for o in model.obstacles]
    bottom_right = [Point(*o.bottom_right) for o in model.obstacles]

    # 3) Roadmap
    roadmap = Roadmap(
        samples,
        top_left,
        bottom_right,
        k=model.roadmap.k,
        n_obstacles=len(model.obstacles),
        n_nodes=len(samples),
        dim=model.roadmap.dim,
        axis_rule=model.roadmap.axis_rule,
        neighbor_mode=model.roadmap.neighbor_mode,
        hooks=hooks,
    )
    return BuiltRoadmap(model, roadmap, recorder)
