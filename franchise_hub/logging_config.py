import logging
import logging.config

# Loggers that carry the import trail (league, category, partition, counts)
APP_LOGGERS = ("franchise_hub", "alembic")


def setup_logging(level: str = "INFO", access_log: bool = True) -> None:
    level = level.upper()
    app_loggers = {
        name: {"level": level, "propagate": True} for name in APP_LOGGERS
    }
    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": "%(asctime)s %(levelname)-7s [%(name)s] %(message)s",
                        "datefmt": "%Y-%m-%d %H:%M:%S"},
            # Uvicorn pre-formats access log lines
            "access": {"format": "%(asctime)s %(message)s", "datefmt": "%H:%M:%S"},
        },
        "handlers": {
            "console": {"class": "logging.StreamHandler", "formatter": "default"},
            "access": {"class": "logging.StreamHandler", "formatter": "access"},
        },
        "loggers": {
            **app_loggers,
            "uvicorn.error": {"level": level, "handlers": ["console"], "propagate": False},
            "uvicorn.access": {"level": "INFO" if access_log else "WARNING",
                               "handlers": ["access"], "propagate": False},
        },
        "root": {"level": "WARNING", "handlers": ["console"]},
    })
