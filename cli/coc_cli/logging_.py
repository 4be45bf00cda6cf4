from __future__ import annotations

import logging

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def setup_logging(verbosity: int) -> None:
    """``-v`` shows coc_client request lines, ``-vv`` adds httpx/httpcore wire logs."""
    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)

    logging.getLogger("coc_client").setLevel(logging.DEBUG if verbosity >= 1 else logging.WARNING)
    wire_level = logging.DEBUG if verbosity >= 2 else logging.WARNING
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(wire_level)
