"""Application entry point for the chat BFF server."""

import sys

import structlog

from chatbff.app import App
from chatbff.config import Config
from chatbff.logging import setup_logging
from chatbff.web.runner import run_server

logger = structlog.get_logger(__name__)


def check_startup_config(config: Config) -> None:
    """Exit when production is missing the upstream API key."""
    if config.is_production and not config.rag_api_key:
        logger.error("missing_rag_api_key", environment=config.environment)
        sys.exit(1)


def main() -> None:
    config = Config()
    setup_logging(config.debug)
    check_startup_config(config)
    logger.info(
        "starting_server",
        port=config.port,
        environment=config.environment,
        allowed_domains=config.allowed_domains,
        rag_api_url=config.rag_api_url,
    )
    app = App(config)
    run_server(app, config)


if __name__ == "__main__":
    main()
