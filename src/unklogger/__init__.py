"""
unklogger – minimal structured console logger.

Import path convention::

    from unklogger import logger
    from unklogger.console import Unklogger, Context
    from unklogger.kernel.time import FrozenClock

``logger`` is the default instance; build isolated ones with
``logger.new()`` or ``Unklogger()``.
"""

from unklogger.console import Context, Console, LoggerConfig, Severity, Unklogger

__version__ = "0.1.0"

logger = Unklogger()

__all__ = [
    "Console",
    "Context",
    "LoggerConfig",
    "Severity",
    "Unklogger",
    "__version__",
    "logger",
]
