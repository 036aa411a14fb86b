import datetime
import logging
from typing import override


from koj.config import settings


def configure_logging(to_file: bool = True):
    """Attach the console handler, and a timestamped file handler if requested"""
    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    if not isinstance(level, int):
        level = logging.DEBUG

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if to_file:
        settings.LOGGING_DIR_PATH.mkdir(parents=True, exist_ok=True)
        now: str = datetime.datetime.now().strftime("%Y-%m-%d-%H-%M")
        FILE_NAME = settings.LOGGING_DIR_PATH / f"{now}.log"

        formatter = logging.Formatter(
            fmt="%(asctime)s - [%(name)s]- %(levelname)s - [%(module)s:%(levelno)s] - %(message)s"
        )
        file_handler = logging.FileHandler(FILE_NAME, encoding="UTF-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(CustomFormatter())
    root_logger.addHandler(console_handler)

    # Worker threads log every lookup; keep the noise down outside debugging
    modules_to_ignore: list[str] = ["LookupWorker"]
    if level > logging.DEBUG:
        for module in modules_to_ignore:
            logging.getLogger(module).setLevel(logging.WARNING)


class CustomFormatter(logging.Formatter):
    """Console formatter colouring each record by its level"""

    grey: str = "\x1b[38;20m"
    yellow: str = "\x1b[33;20m"
    red: str = "\x1b[31;20m"
    bold_red: str = "\x1b[31;1m"
    reset: str = "\x1b[0m"
    custom_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    COLOURS = {
        logging.DEBUG: grey,
        logging.INFO: grey,
        logging.WARNING: yellow,
        logging.ERROR: red,
        logging.CRITICAL: bold_red,
    }

    def __init__(self):
        super().__init__(self.custom_format)
        self._formatters: dict[int, logging.Formatter] = {
            level: logging.Formatter(colour + self.custom_format + self.reset)
            for level, colour in self.COLOURS.items()
        }

    @override
    def format(self, record):
        formatter = self._formatters.get(record.levelno)
        if formatter is None:
            return super().format(record)
        return formatter.format(record)
