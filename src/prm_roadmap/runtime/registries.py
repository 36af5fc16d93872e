# runtime/registries.py
from prm_roadmap.app.protocols import AxisRule, ConnectivityMode
from prm_roadmap.domain.roadmap.collision import axis_blocked_literal, axis_blocked_span
from prm_roadmap.domain.roadmap.neighbors import (
    directed_connectivity,
    intersection_connectivity,
    union_connectivity,
)

_axis_rule_registry: dict[str, AxisRule] = {}
_connectivity_registry: dict[str, ConnectivityMode] = {}


# ------------------- Axis-aligned blocking rules ---------------------------


def register_axis_rule(kind: str):
    def deco(fn: AxisRule):
        _axis_rule_registry[kind] = fn
        return fn

    return deco


def make_axis_rule(kind: str) -> AxisRule:
    try:
        return _axis_rule_registry[kind]
    except KeyError:
        raise ValueError(f"Unknown axis rule {kind!r}")


register_axis_rule("literal")(axis_blocked_literal)
register_axis_rule("span")(axis_blocked_span)


# ------------------- Neighbor connectivity modes ---------------------------


def register_connectivity(kind: str):
    def deco(fn: ConnectivityMode):
        _connectivity_registry[kind] = fn
        return fn

    return deco


def make_connectivity(kind: str) -> ConnectivityMode:
    try:
        return _connectivity_registry[kind]
    except KeyError:
        raise ValueError(f"Unknown neighbor mode {kind!r}")


register_connectivity("directed")(directed_connectivity)
register_connectivity("union")(union_connectivity)
register_connectivity("intersection")(intersection_connectivity)


def axis_rules() -> tuple[str, ...]:
    return tuple(_axis_rule_registry)


def connectivity_modes() -> tuple[str, ...]:
    return tuple(_connectivity_registry)
