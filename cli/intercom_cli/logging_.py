from __future__ import annotations

import logging

CLIENT_LOGGER = "intercom_client"
TRANSPORT_LOGGERS = ("httpx", "httpcore")


def setup_logging(verbose: bool) -> None:
    """Route library logs to stderr; ``--verbose`` also shows request debug lines."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    # failed requests are logged at ERROR, so they stay visible without --verbose
    logging.getLogger(CLIENT_LOGGER).setLevel(level)
    for name in TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(level)
