"""Log output for the proscenium command line.

Library modules only create stdlib loggers. The CLI calls
``configure_logging()`` once to render their records with structlog, on
stderr, either for a terminal or as JSON lines.
"""

from __future__ import annotations

import logging
import sys

import structlog


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Install a single structlog-formatted stderr handler on the root logger.

    Args:
        verbose: Show proscenium's DEBUG records (one per placed item)
        log_json: Render JSON lines instead of console text
    """
    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=[
                structlog.stdlib.add_log_level,
                structlog.stdlib.add_logger_name,
            ],
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger("proscenium").setLevel(logging.DEBUG if verbose else logging.WARNING)
