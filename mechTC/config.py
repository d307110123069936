"""
Numerical tolerances used by the tensor kernel.

The defaults are process-wide and can be replaced as a whole, or loaded
from a JSON file:

    {
        "tolerances": {
            "singular_rtol": 1e-12
        }
    }

Usage:
    from mechTC.config import load_config, set_tolerances

    set_tolerances(load_config("analysis.json"))
"""

import json
from dataclasses import dataclass, fields, asdict
from pathlib import Path
from typing import Dict, Any, Union


@dataclass(frozen=True)
class Tolerances:
    """
    Tolerance settings.

    Attributes:
        singular_rtol: A matrix is treated as singular by the polar
            decomposition when lambda_min <= singular_rtol * lambda_max,
            with lambda the eigenvalues of F^T F.
    """
    singular_rtol: float = 1e-12

    def __post_init__(self):
        if not self.singular_rtol >= 0.0:
            raise ValueError(
                f"singular_rtol must be non-negative, got {self.singular_rtol}"
            )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Tolerances":
        """
        Build settings from a mapping, rejecting unknown keys.

        Parameters:
            data: Mapping of field name -> value

        Returns:
            Tolerances with missing fields left at their defaults
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown tolerance settings: {sorted(unknown)}")
        return cls(**{k: float(v) for k, v in data.items()})

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


_tolerances = Tolerances()


def get_tolerances() -> Tolerances:
    """Current process-wide tolerances."""
    return _tolerances


def set_tolerances(tolerances: Tolerances) -> None:
    """Replace the process-wide tolerances."""
    global _tolerances
    if not isinstance(tolerances, Tolerances):
        raise TypeError(f"Expected Tolerances, got {type(tolerances).__name__}")
    _tolerances = tolerances


def reset_tolerances() -> None:
    """Restore the default tolerances."""
    set_tolerances(Tolerances())


def load_config(filename: Union[str, Path]) -> Tolerances:
    """
    Load tolerance settings from a JSON file.

    Parameters:
        filename: Path to a JSON file with an optional "tolerances" section

    Returns:
        Tolerances (defaults for anything the file does not set)
    """
    with open(filename, 'r') as f:
        config = json.load(f)

    if not isinstance(config, dict):
        raise ValueError(f"{filename}: top level must be a JSON object")

    return Tolerances.from_dict(config.get("tolerances", {}))
