import logging

import uvicorn

from product_api.config import get_config, get_environment


def main() -> None:
    """Run the Product API with the configured host, port and log level."""
    config = get_config()
    logging.basicConfig(level=config.logging.level)
    logging.getLogger(__name__).info(f"Starting Product API ({get_environment()} environment)")

    uvicorn.run(
        "product_api.api:app",
        host=config.server.host,
        port=config.server.port,
        log_level=config.logging.level.lower(),
    )


if __name__ == "__main__":
    main()
