"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── ValidationError              (validation.py)
    │   ├── UnknownHookEventError
    │   ├── NotCallableError
    │   └── InvalidExtensionNameError
    └── ConfigError                  (unklogger.config.validation)
        └── InvalidSettingValueError
"""

from unklogger.kernel.errors.base import BaseError
from unklogger.kernel.errors.validation import (
    InvalidExtensionNameError,
    NotCallableError,
    UnknownHookEventError,
    ValidationError,
)

__all__ = [
    "BaseError",
    "InvalidExtensionNameError",
    "NotCallableError",
    "UnknownHookEventError",
    "ValidationError",
]
