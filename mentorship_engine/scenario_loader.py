"""
scenario_loader.py — Scenario configuration loader.

Loads YAML scenario files and turns them into ready-to-run objects:

    parameters:        # optional, fed to LadderParameters
      seed: 7
    practitioners:
      - {identity: Mira, category: Human, rank: Senior, qualifiers: [Blue]}
      - {identity: Theron, category: Human, mentor: Mira, qualifiers: [Green]}
    representatives:
      - {identity: Aldric, category: Human, home: Westmarch, attributes: [Tariffs]}
      - {identity: Vell, category: Human, home: Eastreach, presiding: true}
    steps:
      - {op: assign, mentor: Mira, apprentice: Theron}
      - {op: train, mentor: Mira, apprentice: Theron}

Public API:
    load_scenario_config(path)      -> raw config dict
    build_scenario(config, seed)    -> Scenario
    load_scenario(path, seed)       -> Scenario
    default_scenario_path()         -> Path of the bundled scenario
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from .core.parameters import LadderParameters
from .core.practitioner import Practitioner
from .core.ranks import Rank
from .core.representative import Representative, make_presiding
from .core.roster import Roster


# ─────────────────────────────────────────────────────────────────────────── #
# Step schema                                                                  #
# ─────────────────────────────────────────────────────────────────────────── #

# op -> (required keys, keys that must name a practitioner,
#        keys that must name a representative)
STEP_SCHEMA: Dict[str, tuple] = {
    "section": (("title",), (), ()),
    "display": (("who",), ("who",), ()),
    "assign": (("mentor", "apprentice"), ("mentor", "apprentice"), ()),
    "attempt": (("who",), ("who",), ()),
    "promote": (("who",), ("who",), ()),
    "graduate": (("mentor", "apprentice"), ("mentor", "apprentice"), ()),
    "train": (("mentor", "apprentice"), ("mentor", "apprentice"), ()),
    "speak": (("who", "text"), (), ()),
    "add_attribute": (("who", "value"), (), ("who",)),
    "list_attributes": (("who",), (), ("who", "lister")),
    "exchange": (("initiator", "counterpart"), (), ("initiator", "counterpart")),
}


@dataclass
class Scenario:
    """A loaded, validated scenario.

    Attributes:
        name:            Scenario name.
        params:          Ladder parameters.
        roster:          All practitioners, in declaration order.
        representatives: Representatives keyed by identity, declaration order.
        steps:           Ordered list of step dicts (each has an "op" key).
    """

    name: str
    params: LadderParameters
    roster: Roster
    representatives: Dict[str, Representative] = field(default_factory=dict)
    steps: List[Dict[str, Any]] = field(default_factory=list)


def default_scenario_path() -> Path:
    return Path(__file__).resolve().parent / "scenarios" / "default.yaml"


# ─────────────────────────────────────────────────────────────────────────── #
# YAML loading + validation                                                    #
# ─────────────────────────────────────────────────────────────────────────── #

def load_scenario_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """Load a scenario YAML file and check its top-level shape."""
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Scenario not found: {path.resolve()}")

    with open(path, "r", encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    if not isinstance(config, dict):
        raise ValueError("Scenario file must contain a mapping at the top level.")
    for key in ("practitioners", "representatives", "steps"):
        value = config.get(key, [])
        if not isinstance(value, list):
            raise ValueError(f"Scenario '{key}' must be a list.")
    if not config.get("steps"):
        warnings.warn(f"Scenario '{path.name}' has no steps.")
    config.setdefault("name", path.stem)
    return config


def _build_practitioner(spec: Dict[str, Any], params: LadderParameters) -> Practitioner:
    if "identity" not in spec:
        raise ValueError("Each practitioner must have an 'identity' field.")
    return Practitioner(
        identity=spec["identity"],
        category=spec.get("category", "Unknown"),
        rank=Rank.parse(spec.get("rank", Rank.APPRENTICE)),
        qualifiers=spec.get("qualifiers", []),
        mentor=spec.get("mentor"),
        has_qualified=spec.get("has_qualified", params.default_has_qualified),
    )


def _build_representative(spec: Dict[str, Any]) -> Representative:
    if "identity" not in spec:
        raise ValueError("Each representative must have an 'identity' field.")
    args = (
        spec["identity"],
        spec.get("category", "Unknown"),
        spec.get("home", "Unknown"),
        spec.get("attributes", []),
    )
    if spec.get("presiding", False):
        return make_presiding(*args, title=spec.get("title", "Chancellor"))
    return Representative(*args)


def _validate_steps(
    steps: List[Dict[str, Any]],
    roster: Roster,
    representatives: Dict[str, Representative],
) -> None:
    for i, step in enumerate(steps):
        if not isinstance(step, dict) or "op" not in step:
            raise ValueError(f"Step {i} must be a mapping with an 'op' field.")
        op = step["op"]
        if op not in STEP_SCHEMA:
            raise ValueError(
                f"Step {i}: unknown op '{op}'. Available: {sorted(STEP_SCHEMA)}"
            )
        required, practitioner_keys, representative_keys = STEP_SCHEMA[op]
        missing = [k for k in required if k not in step]
        if missing:
            raise ValueError(f"Step {i} ({op}) is missing {missing}.")
        for key in practitioner_keys:
            if step[key] not in roster:
                raise ValueError(f"Step {i} ({op}): unknown practitioner {step[key]!r}.")
        for key in representative_keys:
            if key in step and step[key] not in representatives:
                raise ValueError(
                    f"Step {i} ({op}): unknown representative {step[key]!r}."
                )
        if op == "speak":
            who = step["who"]
            if who not in roster and who not in representatives:
                raise ValueError(f"Step {i} (speak): unknown speaker {who!r}.")


def build_scenario(config: Dict[str, Any], seed: Optional[int] = None) -> Scenario:
    """Convert a raw scenario config into a Scenario.

    Args:
        config: Dict as returned by load_scenario_config().
        seed:   If given, overrides parameters.seed.
    """
    raw_params = dict(config.get("parameters") or {})
    if seed is not None:
        raw_params["seed"] = seed
    params = LadderParameters.from_dict(raw_params)

    roster = Roster()
    for spec in config.get("practitioners", []):
        roster.register(_build_practitioner(spec, params))
    for p in roster:
        if p.mentor_name is not None and p.mentor_name not in roster:
            warnings.warn(
                f"Practitioner '{p.identity}' names mentor '{p.mentor_name}' "
                "who is not in the scenario."
            )

    representatives: Dict[str, Representative] = {}
    for spec in config.get("representatives", []):
        rep = _build_representative(spec)
        if rep.identity in representatives:
            raise ValueError(f"Duplicate representative {rep.identity!r}.")
        representatives[rep.identity] = rep

    steps = [dict(s) for s in config.get("steps", [])]
    _validate_steps(steps, roster, representatives)

    return Scenario(
        name=str(config.get("name", "scenario")),
        params=params,
        roster=roster,
        representatives=representatives,
        steps=steps,
    )


def load_scenario(
    config_path: Union[str, Path, None] = None,
    seed: Optional[int] = None,
) -> Scenario:
    """Load and build a scenario (the bundled default when no path is given)."""
    path = config_path if config_path is not None else default_scenario_path()
    return build_scenario(load_scenario_config(path), seed=seed)
