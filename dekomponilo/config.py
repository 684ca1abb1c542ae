"""
Decomposer configuration.

Defaults reproduce the classic behavior. Values can be overridden from the
environment (DEKOMPONILO_*) or from CLI flags.
"""
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

CORRECTION_SCOPES = ("top", "every")

DEFAULT_FAILURE_MARKER = "❌ "
DEFAULT_FAILURE_GLOSS = "Ne valida sekvo aŭ komponento"

ENV_CORRECTION_SCOPE = "DEKOMPONILO_CORRECTION_SCOPE"
ENV_FAILURE_MARKER = "DEKOMPONILO_FAILURE_MARKER"
ENV_FAILURE_GLOSS = "DEKOMPONILO_FAILURE_GLOSS"


@dataclass(frozen=True)
class DecomposerConfig:
    """
    Settings for a Decomposer.

    Attributes:
        correction_scope: "top" reconsiders only the first piece of the whole
            word; "every" reconsiders the first piece of every sub-search.
        failure_marker: Visible prefix on a failure segment's surface text.
        failure_gloss: Gloss attached to failure segments.
    """
    correction_scope: str = "top"
    failure_marker: str = DEFAULT_FAILURE_MARKER
    failure_gloss: str = DEFAULT_FAILURE_GLOSS

    def __post_init__(self):
        if self.correction_scope not in CORRECTION_SCOPES:
            raise ValueError(
                f"Nevalida correction_scope '{self.correction_scope}'. "
                f"Atendis unu el: {', '.join(CORRECTION_SCOPES)}"
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DecomposerConfig":
        """Build a config from DEKOMPONILO_* environment variables."""
        env = os.environ if environ is None else environ
        return cls(
            correction_scope=env.get(ENV_CORRECTION_SCOPE, "top").strip().lower(),
            failure_marker=env.get(ENV_FAILURE_MARKER, DEFAULT_FAILURE_MARKER),
            failure_gloss=env.get(ENV_FAILURE_GLOSS, DEFAULT_FAILURE_GLOSS),
        )

    def with_overrides(self, **overrides) -> "DecomposerConfig":
        """Return a copy with the non-None overrides applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self
