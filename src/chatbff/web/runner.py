"""Uvicorn server runner for the BFF."""

import copy
from typing import Any

import uvicorn
from uvicorn.config import LOGGING_CONFIG

from chatbff.app import App
from chatbff.config import Config
from chatbff.web.server import create_fastapi_app

ACCESS_FORMAT = '%(asctime)s - %(client_addr)s - "%(request_line)s" %(status_code)s'
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def build_log_config(debug: bool) -> dict[str, Any]:
    """Uvicorn logging config with the BFF's formats; uvicorn's own default is left untouched."""
    log_config = copy.deepcopy(LOGGING_CONFIG)
    log_config["formatters"]["access"]["fmt"] = ACCESS_FORMAT
    log_config["formatters"]["default"]["fmt"] = DEFAULT_FORMAT
    level = "DEBUG" if debug else "INFO"
    for logger_config in log_config["loggers"].values():
        if "level" in logger_config:
            logger_config["level"] = level
    return log_config


def run_server(app: App, config: Config) -> None:
    fastapi_app = create_fastapi_app(app, config)
    uvicorn.run(
        fastapi_app,
        host=config.host,
        port=config.port,
        log_config=build_log_config(config.debug),
        access_log=True,
    )
