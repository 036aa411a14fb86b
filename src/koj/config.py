"""
Contains the configuration options for the Koj search
"""

import json
import logging
import os
from pathlib import Path

from pydantic import ValidationError
from pydantic_settings import BaseSettings

USERPROFILE: Path = Path(os.getenv("userprofile", os.getenv("HOME", "")))
BASE_FOLDER: Path = (USERPROFILE / ".koj").resolve()
SETTINGS_FILE_PATH: Path = BASE_FOLDER / "config.json"

BASE_FOLDER.mkdir(parents=True, exist_ok=True)


class Settings(BaseSettings):
    """Settings class for the Koj search"""

    DATA_DIR_PATH: Path = BASE_FOLDER / "data"
    LOGGING_DIR_PATH: Path = DATA_DIR_PATH / "logging"
    DATABASE_PATH: Path = DATA_DIR_PATH / "lines.sqlite"
    LOG_LEVEL: str = "DEBUG"

    # Search
    MIN_SEARCH_CHARS: int = 2
    MAX_RESULTS: int = 20
    # Leading characters that select a search mode
    SEARCH_ANCHORS: dict[str, str] = {"#": "full-word"}
    # Keystroke standing in for "any letter" in first letter searches
    SEARCH_WILDCARD_CHAR: str = " "

    # Results
    RESULT_TRANSLITERATION_LANGUAGE: int | None = 1
    RESULT_TRANSLATION_LANGUAGE: int | None = 1
    SHOW_RESULT_CITATIONS: bool = True
    SOURCE_ABBREVIATIONS: dict[int, str] = {
        1: "SGGS",
        2: "DG",
        3: "BGV",
        4: "KBG",
    }

    @classmethod
    def load_from_file(cls, path: Path) -> "Settings":
        """Loads settings from a JSON file."""
        if not path.exists():
            return cls()

        # Unreadable or invalid settings fall back to the defaults
        try:
            return cls.model_validate(json.loads(path.read_text(encoding="utf-8")))
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            logging.getLogger("Config").error(
                "Error loading settings from %s: %s", path, e
            )
            return cls()

    def save_to_file(self, path: Path):
        """Saves settings to JSON file."""
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            _ = path.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        except OSError as e:
            logging.getLogger("Config").error("Error saving settings to %s: %s", path, e)


settings = Settings.load_from_file(Path(SETTINGS_FILE_PATH))
