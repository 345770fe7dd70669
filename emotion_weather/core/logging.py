import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from emotion_weather.core.config import Settings, settings as default_settings


def configure_logging(settings: Settings = default_settings) -> None:
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return

    log_path = Path(settings.data_dir) / "app.log"
    log_path.parent.mkdir(parents=True, exist_ok=True)

    root_logger.setLevel(settings.log_level.upper())

    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    file_handler = RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=3)
    file_handler.setFormatter(formatter)

    root_logger.addHandler(console_handler)
    root_logger.addHandler(file_handler)
