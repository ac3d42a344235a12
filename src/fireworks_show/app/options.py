"""Display options."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from fireworks_show.engine.explosions import FRAGMENT_COUNT, MAX_NORMAL_FRAGMENTS
from fireworks_show.types import Shape

MIN_FREQUENCY = 1
MAX_FREQUENCY = 10
DEFAULT_FREQUENCY = 5
MAX_CONCURRENT_FIREWORKS = 15
DEFAULT_GRAVITY = 0.07

# Accepted spellings of the path reference option
PATH_REFERENCE_KEYS = ("path_reference", "pathReference", "svg-path-id", "svgPathId")


@dataclass
class FireworksOptions:
    """Options for one fireworks display."""

    frequency: int = DEFAULT_FREQUENCY  # Explosions per second
    shape: Shape = Shape.NORMAL
    path_reference: Optional[str] = None
    max_concurrent: int = MAX_CONCURRENT_FIREWORKS
    gravity: float = DEFAULT_GRAVITY
    normal_fragments: int = FRAGMENT_COUNT

    def __post_init__(self) -> None:
        self.shape = Shape.from_name(self.shape)
        self.validate()

    @property
    def ignite_interval_ms(self) -> float:
        """Minimum time between ignitions, in milliseconds."""
        return 1000 / self.frequency

    def validate(self) -> None:
        """Check option values.

        Raises:
            ValueError: If any option is out of range.
        """
        if not MIN_FREQUENCY <= self.frequency <= MAX_FREQUENCY:
            raise ValueError(
                f"frequency must be between {MIN_FREQUENCY} and {MAX_FREQUENCY}, "
                f"got {self.frequency}"
            )
        if self.max_concurrent < 1:
            raise ValueError(f"max_concurrent must be at least 1, got {self.max_concurrent}")
        if self.gravity <= 0:
            raise ValueError(f"gravity must be positive, got {self.gravity}")
        if not FRAGMENT_COUNT <= self.normal_fragments <= MAX_NORMAL_FRAGMENTS:
            raise ValueError(
                f"normal_fragments must be between {FRAGMENT_COUNT} and "
                f"{MAX_NORMAL_FRAGMENTS}, got {self.normal_fragments}"
            )
        if self.shape is Shape.CUSTOM_PATH and not self.path_reference:
            raise ValueError("path_reference is required when shape is custom-path")

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> FireworksOptions:
        """Create options from a plain mapping.

        Missing or empty values fall back to the defaults.

        Args:
            data: Option mapping, e.g. ``{"frequency": 3, "shape": "hearts"}``.

        Returns:
            Validated options.

        Raises:
            ValueError: If a value is invalid.
        """
        data = data or {}

        path_reference = None
        for key in PATH_REFERENCE_KEYS:
            if data.get(key):
                path_reference = str(data[key])
                break

        return cls(
            frequency=int(data.get("frequency") or DEFAULT_FREQUENCY),
            shape=Shape.from_name(data.get("shape") or Shape.NORMAL),
            path_reference=path_reference,
            max_concurrent=int(data.get("max_concurrent") or MAX_CONCURRENT_FIREWORKS),
            gravity=float(data.get("gravity") or DEFAULT_GRAVITY),
            normal_fragments=int(data.get("normal_fragments") or FRAGMENT_COUNT),
        )
