"""Package logging for maxigraph.

Every module logs under the ``maxigraph`` logger, which receives a single
stdout handler the first time a module asks for a logger. The algorithms emit
one DEBUG summary line per run (vertices visited or finalized, queue traffic)
through `log_run_summary`; `set_run_summaries` silences those lines for the
whole package without touching logger levels.

Example:
    import logging
    from maxigraph import dijkstra

    logging.getLogger("maxigraph").setLevel(logging.DEBUG)
    dijkstra(graph, "A")  # ... Dijkstra from 'A': finalized 4 vertices, ...
"""

import logging
import sys
from typing import Any, Optional

ROOT_LOGGER_NAME = "maxigraph"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Handler installed by setup_root_logger; None until the first call
_package_handler: Optional[logging.Handler] = None
_run_summaries = True


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> logging.Logger:
    """Install the package handler on the ``maxigraph`` logger.

    Only the first call has an effect; later calls return the logger as is
    until `reset_logging` removes the handler.

    Args:
        level: Level for the ``maxigraph`` logger. Use ``logging.DEBUG`` to
            see run summaries.
        format_string: Record format; defaults to `DEFAULT_FORMAT`.
        handler: Destination; defaults to a stdout ``StreamHandler``.

    Returns:
        The ``maxigraph`` logger.
    """
    global _package_handler

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if _package_handler is not None:
        return package_logger

    _package_handler = handler or logging.StreamHandler(sys.stdout)
    _package_handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    package_logger.addHandler(_package_handler)
    package_logger.setLevel(level)
    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Return the logger for module ``name``, installing the handler if needed."""
    setup_root_logger()
    return logging.getLogger(name)


def set_run_summaries(enabled: bool) -> None:
    """Turn the per-run algorithm summary lines on or off."""
    global _run_summaries
    _run_summaries = enabled


def run_summaries_enabled() -> bool:
    return _run_summaries


def log_run_summary(logger: logging.Logger, message: str, *args: Any) -> None:
    """Log ``message % args`` at DEBUG unless run summaries are switched off."""
    if _run_summaries:
        logger.debug(message, *args)


def reset_logging() -> None:
    """Remove the package handler and restore the defaults (mainly for tests)."""
    global _package_handler, _run_summaries

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if _package_handler is not None:
        package_logger.removeHandler(_package_handler)
    _package_handler = None
    _run_summaries = True
    package_logger.setLevel(logging.NOTSET)


setup_root_logger()
