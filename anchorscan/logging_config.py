import logging
import os

# Loggers of this project's packages.
_PROJECT_LOGGERS = ("anchorscan", "cli")


def setup_logging(default_level: int = logging.WARNING) -> None:
    """
    Basic logging configuration for anchorscan.

    Call this once at startup (the CLI does it before prompting). Log records
    go to stderr so that stdout only carries the extracted links.
    """
    log_level_name = os.getenv("LOG_LEVEL", "").upper()
    level = getattr(logging, log_level_name, default_level)

    if logging.getLogger().handlers:
        # Already configured (e.g. by pytest): keep its handlers, only apply our level.
        for name in _PROJECT_LOGGERS:
            logging.getLogger(name).setLevel(level)
        return

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
