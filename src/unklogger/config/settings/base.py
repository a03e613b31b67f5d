"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass
class Settings:
    """Base class for env-overridable settings.

    Subclasses set ``_prefix``; field ``quiet`` of a subclass with prefix
    ``UNKLOGGER`` is read from ``UNKLOGGER_QUIET``.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


__all__ = ["Settings"]
