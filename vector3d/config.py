"""Tolerance defaults and loaders for vector comparisons."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, fields
from typing import Mapping, Optional

LOGGER = logging.getLogger(__name__)

DEFAULT_UNIT_EPSILON = 1e-12
DEFAULT_APPROX_EPSILON = 1e-9
DEFAULT_ZERO_EPSILON = 1e-12


def _validate_epsilon(name: str, value: float) -> float:
    if not math.isfinite(value) or value <= 0.0:
        raise ValueError(f"{name} must be a finite positive number, got {value!r}")
    return value


# //1.- Bundle the three tolerance windows so callers can thread them through explicitly.
@dataclass(frozen=True)
class Tolerances:
    """Epsilons used by ``unit``, ``approx_equals`` and ``is_zero``."""

    unit_epsilon: float = DEFAULT_UNIT_EPSILON
    approx_epsilon: float = DEFAULT_APPROX_EPSILON
    zero_epsilon: float = DEFAULT_ZERO_EPSILON

    def __post_init__(self) -> None:
        for field in fields(self):
            _validate_epsilon(field.name, getattr(self, field.name))

    # //2.- Build tolerances from a partial mapping, keeping defaults for missing keys.
    @classmethod
    def from_mapping(cls, payload: Optional[Mapping[str, object]] = None) -> "Tolerances":
        if not payload:
            return cls()
        known = {field.name for field in fields(cls)}
        unknown = sorted(set(payload) - known)
        if unknown:
            LOGGER.warning("Ignoring unknown tolerance keys: %s", ", ".join(unknown))
        values = {}
        for name in sorted(known & set(payload)):
            raw = payload[name]
            try:
                values[name] = float(raw)  # type: ignore[arg-type]
            except (TypeError, ValueError) as exc:
                raise ValueError(f"{name} is not a number: {raw!r}") from exc
            LOGGER.debug("Tolerance %s set to %s", name, values[name])
        return cls(**values)


def load_tolerances(mapping: Optional[Mapping[str, object]] = None) -> Tolerances:
    """Resolve tolerances from ``mapping``, falling back to the defaults."""

    return Tolerances.from_mapping(mapping)
