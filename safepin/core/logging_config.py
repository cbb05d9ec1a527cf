# safepin/core/logging_config.py
import logging.config

from safepin.core.config import settings

NOISY_LOGGERS = ("httpx", "httpcore", "botocore", "boto3", "urllib3")


def setup_logging(level: str | None = None) -> None:
    level = (level or settings.LOG_LEVEL).upper()
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": "%(asctime)s %(levelname)s [%(name)s] %(message)s",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                },
            },
            "root": {"handlers": ["console"], "level": level},
            "loggers": {
                name: {"level": "WARNING"} for name in NOISY_LOGGERS
            },
        }
    )
