"""
Ladder parameters.

All tunables of the mentorship simulation live in one immutable, validated
dataclass:

  - die_sides / success_face : the qualification draw is uniform on
                               1..die_sides and passes only on success_face
                               (defaults give a 1-in-10 chance per attempt)
  - graduation thresholds    : former-apprentice counts needed to leave the
                               ADEPT and SENIOR ranks
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict


@dataclass(frozen=True)
class LadderParameters:
    """Immutable, fully validated ladder parameters."""

    # ------------------------------------------------------------------ #
    # Qualification draw                                                   #
    # ------------------------------------------------------------------ #
    die_sides: int = 10
    """Upper bound of the inclusive draw range 1..die_sides (>= 1)."""

    success_face: int = 1
    """Draw value that passes qualification (1 <= face <= die_sides)."""

    # ------------------------------------------------------------------ #
    # Graduation thresholds                                                #
    # ------------------------------------------------------------------ #
    adept_graduations_required: int = 1
    """Former apprentices needed to advance from ADEPT (>= 0)."""

    senior_graduations_required: int = 2
    """Former apprentices needed to advance from SENIOR (>= adept requirement)."""

    # ------------------------------------------------------------------ #
    # Construction defaults                                                #
    # ------------------------------------------------------------------ #
    default_has_qualified: bool = False
    """Qualification flag given to practitioners built from a scenario."""

    seed: int = 0
    """Seed for the default numpy random source (non-negative)."""

    def __post_init__(self) -> None:
        """Validate all parameter constraints."""
        errors = []

        if self.die_sides < 1:
            errors.append(f"die_sides must be >= 1, got {self.die_sides}")
        if not 1 <= self.success_face <= max(self.die_sides, 1):
            errors.append(
                f"success_face must be in [1, {self.die_sides}], "
                f"got {self.success_face}"
            )
        if self.adept_graduations_required < 0:
            errors.append(
                "adept_graduations_required must be >= 0, "
                f"got {self.adept_graduations_required}"
            )
        if self.senior_graduations_required < self.adept_graduations_required:
            errors.append(
                "senior_graduations_required must be >= "
                f"adept_graduations_required ({self.adept_graduations_required}), "
                f"got {self.senior_graduations_required}"
            )
        if self.seed < 0:
            errors.append(f"seed must be >= 0, got {self.seed}")

        if errors:
            raise ValueError(
                "LadderParameters validation failed:\n"
                + "\n".join(f"  - {e}" for e in errors)
            )

    @property
    def success_probability(self) -> float:
        """Chance that a single qualification attempt passes."""
        return 1.0 / self.die_sides

    def to_dict(self) -> Dict[str, Any]:
        """Serialise to plain dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LadderParameters":
        """Deserialise from plain dictionary.

        Raises:
            ValueError: If the dictionary contains unknown keys.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(
                f"Unknown LadderParameters keys: {sorted(unknown)}"
            )
        return cls(**data)
