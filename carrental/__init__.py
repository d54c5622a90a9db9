import logging
import os

from flask import Flask

from .controllers.cli import reset_command, seed_command, session_command
from .models.store import DEFAULT_DATA_PATH, Store
from .utils.constants import MAX_LOAN_AMOUNT, MAX_RENTAL_DAYS
from .utils.filters import DEFAULT_CURRENCY, DEFAULT_TZ

LOG_FORMAT = "[%(name)s] %(levelname)s: %(message)s"


def configure_logging(level) -> logging.Logger:
    """Attach one stderr handler to the package logger."""
    logger = logging.getLogger("carrental")
    if not any(getattr(h, "_carrental", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._carrental = True
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_mapping(
        DATA_PATH=str(DEFAULT_DATA_PATH),
        LOG_LEVEL="INFO",
        DISPLAY_TZ=DEFAULT_TZ,
        CURRENCY_SYMBOL=DEFAULT_CURRENCY,
        MAX_RENTAL_DAYS=MAX_RENTAL_DAYS,
        MAX_LOAN_AMOUNT=str(MAX_LOAN_AMOUNT),
        SEED_ON_EMPTY=True,
        # skipped in test environments
        SAVE_ON_EXIT=os.getenv("APP_ENV") != "test",
    )
    # e.g. CARRENTAL_DATA_PATH, CARRENTAL_MAX_RENTAL_DAYS=30
    app.config.from_prefixed_env("CARRENTAL")
    if test_config:
        app.config.update(test_config)

    configure_logging(str(app.config["LOG_LEVEL"]).upper())

    # load data.json or init the default fleet
    app.extensions["carrental.store"] = Store(app.config["DATA_PATH"], seed=app.config["SEED_ON_EMPTY"])

    app.cli.add_command(session_command)
    app.cli.add_command(seed_command)
    app.cli.add_command(reset_command)

    return app
