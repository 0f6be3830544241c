# filename : main.py
# created  : 10/19/2026

"""Shell session: command file or interactive REPL."""

from __future__ import annotations

import logging

from spooltag.app.commands import COMMAND_MODULES
from spooltag.app.runner import Runner
from spooltag.app.service import ChipService

lg = logging.getLogger(__name__)


def main(service: ChipService, file: str | None = None) -> bool:
    """Run a command file, or the interactive shell when no file is given."""
    lg.debug("sector %d block %d", service.config.address.sector, service.config.address.block)
    runner = Runner(service, COMMAND_MODULES)
    if file:
        return runner.run_file(file)
    runner.run_interactive()
    return True
