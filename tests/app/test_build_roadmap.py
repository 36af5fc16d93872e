# tests/app/test_build_roadmap.py
import numpy as np
import pytest
from pydantic import ValidationError

from prm_roadmap.app.build import build
from prm_roadmap.app.events import RoadmapBuilt
from prm_roadmap.config.models import ScenarioModel
from prm_roadmap.io.recorder import MemorySink


def _cfg(**roadmap):
    return {
        "name": "test",
        "run_id": "t-1",
        "roadmap": {"k": 5, **roadmap},
        "samples": [(0, 0), (10, 10), (20, 0), (5, 5)],
        "obstacles": [{"top_left": (4, 2), "bottom_right": (6, 8)}],
    }


def test_build_from_mapping():
    built = build(_cfg(), use_logging=False)
    rm = built.roadmap
    assert built.recorder is None
    assert built.scenario.name == "test"
    assert rm.n_nodes == 3
    assert rm.adjacency().tolist() == [
        [0.0, 0.0, 1.0],
        [0.0, 0.0, 1.0],
        [1.0, 1.0, 0.0],
    ]
    assert rm.manhattan_adjacency()[0, 2] == 20


def test_build_from_model_with_memory_sink():
    sink = MemorySink()
    built = build(ScenarioModel.model_validate(_cfg()), sinks=(sink,))
    assert isinstance(sink.events[-1], RoadmapBuilt)
    assert sink.events[-1].edges == 2


def test_build_passes_rules_through():
    cfg = _cfg(axis_rule="span", neighbor_mode="union", dim=64)
    cfg["samples"] = [(0, 5), (10, 5)]
    cfg["obstacles"] = [{"top_left": (3, 3), "bottom_right": (7, 7)}]
    rm = build(cfg, use_logging=False).roadmap
    assert rm.dim == 64
    assert rm.axis_rule == "span" and rm.neighbor_mode == "union"
    assert not np.any(rm.adjacency())


def test_build_rejects_bad_config():
    cfg = _cfg()
    cfg["obstacles"] = [{"top_left": (6, 2), "bottom_right": (4, 8)}]
    with pytest.raises(ValidationError):
        build(cfg, use_logging=False)
