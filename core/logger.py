import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Attach a stdout handler to the root logger once; later calls only adjust the level."""

    level = (level or "INFO").upper()
    root = logging.getLogger()
    numeric_level = getattr(logging, level, logging.INFO)

    if root.handlers:
        # uvicorn, pytest or an earlier import already installed handlers
        root.setLevel(numeric_level)
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))
    root.addHandler(handler)
    root.setLevel(numeric_level)
    logging.getLogger(__name__).debug("Logging configured at %s", level)
