from __future__ import annotations

import logging

TRACE = 15
PROTOCOL = 18
logging.addLevelName(TRACE, "TRACE")
logging.addLevelName(PROTOCOL, "PROTOCOL")

LOG_FORMAT = "%(levelname)-8s %(name)s: %(message)s"


def configure(verbose: bool = False) -> None:
    """Set up root logging. Verbose adds the raw APDU trace."""
    logging.basicConfig(level=TRACE if verbose else PROTOCOL, format=LOG_FORMAT)
