import logging
import sys

LOG_FORMAT = "[%(asctime)s %(levelname)s %(module)s line:%(lineno)d] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger("blobvault")
    root.handlers[:] = [handler]
    root.setLevel(level.upper())
    root.propagate = False
