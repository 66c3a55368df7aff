"""examples/logging_bridge_usage.py - Route standard logging through linewriter.

Existing ``logging`` calls pick up the shared writer's decoration and are
counted like any other emission.

Run:
    python examples/logging_bridge_usage.py
"""

import logging

from linewriter import LogWriterHandler, get_writer

log = get_writer()
log.set_prefix("[svc] ")

handler = LogWriterHandler()
handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))

logger = logging.getLogger("inventory")
logger.setLevel(logging.INFO)
logger.addHandler(handler)
logger.propagate = False


if __name__ == "__main__":
    logger.info("loaded %d products", 3)
    logger.warning("product %s is out of stock", "B-2")
    logger.debug("not shown, below INFO")

    log.clear_prefix()
    log.emit("si", "lines written through the bridge:", log.get_count())
