"""Walk through the console logger's output forms.

Run with::

    pip install -e .
    python docs/examples/demo.py
"""
from __future__ import annotations

from unklogger import logger

logger.info("I'm a single string.")

record = {
    "number": 123,
    "object": {"0": "asd"},
}
logger.info(record)
logger.info("Object", record, "String after object.")

record["a"] = record
logger.info("Circular object", record)

logger.warn("String", "Text string that is long enough.")
logger.warn(["Multiple", "Tags"], "I support multiple tags.")
logger.success("Array", [0, 1, 2, 3, 4, 5])

try:
    raise RuntimeError("Oops, something went wrong. Whoopsy daisy...")
except RuntimeError as exc:
    logger.error("Error", exc, "logged after the traceback")

audit = logger.clone()
audit.add_hook("beforeWrite", lambda ctx: setattr(ctx, "output", ctx.output + " (audited)"))
audit.add_extension("again", lambda ctx: audit.info(*ctx.arguments))
audit.info("Audit", "clone with its own hook").again()
