import logging.config
import os

ENVIRONMENT = "OPENAPI_EXAMPLES_LOGGING_HANDLERS"

handlers = None


def init():
    """
    configure the openapi_examples logger once per process

    export OPENAPI_EXAMPLES_LOGGING_HANDLERS=debug to get /tmp/openapi-examples-debug.log,
    console logs to stderr, both can be combined: console,debug
    """
    global handlers

    if handlers is not None:
        return

    handlers = list(filter(len, os.environ.get(ENVIRONMENT, "").split(",")))
    if not handlers:
        return

    available = {
        "console": {
            "class": "logging.StreamHandler",
            "level": "DEBUG",
            "formatter": "plain",
        },
        "debug": {
            "class": "logging.handlers.WatchedFileHandler",
            "level": "DEBUG",
            "formatter": "detailed",
            "filename": "/tmp/openapi-examples-debug.log",
        },
    }

    if unknown := set(handlers) - set(available):
        raise ValueError(f"{ENVIRONMENT}: unknown handlers {', '.join(sorted(unknown))}")

    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "detailed": {
                "class": "logging.Formatter",
                "format": "%(asctime)s %(name)-9s %(levelname)-4s %(message)s",
            },
            "plain": {
                "class": "logging.Formatter",
                "format": "%(message)s",
            },
        },
        "handlers": {name: available[name] for name in handlers},
        "loggers": {
            "openapi_examples": {"level": "DEBUG", "handlers": handlers},
        },
    }

    logging.config.dictConfig(config)
