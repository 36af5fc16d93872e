# io/build_logging.py
import json
import logging
import sys

from prm_roadmap.app.events import (
    BuildStarted,
    EdgesFiltered,
    NeighborsSelected,
    RoadmapBuilt,
    SamplesFiltered,
)
from prm_roadmap.domain.roadmap.hooks import NoopHooks
from prm_roadmap.io.recorder import Recorder


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        return json.dumps(payload)


def _default_json_logger(name="prm_roadmap", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


class RoadmapLogging(NoopHooks):
    """
    Structured logs for each construction stage, plus a stage report for the recorder.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        logger: logging.Logger | None = None,
        recorder: Recorder | None = None,
    ):
        self.run_id, self.debug = run_id, debug
        self.recorder = recorder
        self.log = logger or _default_json_logger(level=level)

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    def _record(self, ev):
        if self.recorder:
            self.recorder.emit(ev)

    # ------------- construction stages --------------------

    def build_start(self, *, n_samples: int, n_obstacles: int, k: int, dim: int):
        self._emit("INFO", "build_start", n_samples=n_samples, n_obstacles=n_obstacles, k=k, dim=dim)
        self._record(BuildStarted(self.run_id, n_samples, n_obstacles, k, dim))

    def samples_filtered(self, *, kept: int, removed: int):
        self._emit("INFO", "samples_filtered", kept=kept, removed=removed)
        if kept == 0:
            self._emit("WARNING", "no_free_samples", removed=removed)
        self._record(SamplesFiltered(self.run_id, kept, removed))

    def neighbors_selected(self, *, n_nodes: int, k: int, mode: str, edges: int):
        if self.debug:
            self._emit("DEBUG", "neighbors_selected", n_nodes=n_nodes, k=k, mode=mode, edges=edges)
        self._record(NeighborsSelected(self.run_id, n_nodes, k, mode, edges))

    def edges_filtered(self, *, tested: int, removed: int, axis_rule: str):
        if self.debug:
            self._emit(
                "DEBUG", "edges_filtered", tested=tested, removed=removed, axis_rule=axis_rule
            )
        self._record(EdgesFiltered(self.run_id, tested, removed, axis_rule))

    def build_end(self, *, n_nodes: int, edges: int, wall_ms: float):
        self._emit("INFO", "build_end", n_nodes=n_nodes, edges=edges, wall_ms=round(wall_ms, 3))
        self._record(RoadmapBuilt(self.run_id, n_nodes, edges, wall_ms))
