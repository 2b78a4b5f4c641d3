import logging

import uvicorn

from blobvault.config import load_config
from blobvault.infra.log import configure_logging
from blobvault.main import create_app

logger = logging.getLogger("blobvault")


def main() -> None:
    cfg = load_config()
    configure_logging(cfg.log_level)
    app = create_app(cfg)
    logger.info("Server is running on %s:%d", cfg.host, cfg.port)
    uvicorn.run(app, host=cfg.host, port=cfg.port, log_level=cfg.log_level.lower())


if __name__ == "__main__":
    main()
