"""Builder configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

FALLBACK_ENV_VAR = "SELECTOR_BUILDER_FALLBACK"


@dataclass(frozen=True)
class BuilderConfig:
    fallback_element: str = "div"  # rendered for a selector with no fragments

    @classmethod
    def from_env(cls) -> BuilderConfig:
        """Build a config, letting environment variables override defaults."""
        fallback = os.environ.get(FALLBACK_ENV_VAR)
        if fallback:
            return cls(fallback_element=fallback)
        return cls()
