"""
Settings manager for the palette reader
Handles saving and loading reader preferences
"""

import codecs
import json
import os
from pathlib import Path
from typing import Any, Optional

from .constants import DEFAULT_ENCODING, MAX_PALETTE_FILE_SIZE
from .logging_config import get_logger
from .parsing_mode import ParsingMode

logger = get_logger(__name__)

HOME_ENV_VAR = "PALETTE_READER_HOME"
DEFAULT_LOG_LEVEL = "INFO"


class SettingsManager:
    """Manages reader settings with persistence"""

    def __init__(self, app_name="palette_reader", settings_dir: Optional[Path] = None):
        self.app_name = app_name
        self.settings_file = self._get_settings_path(settings_dir)
        self.settings = self._load_settings()

    def _get_settings_path(self, settings_dir: Optional[Path] = None) -> Path:
        """Get the appropriate settings directory for the platform"""
        if settings_dir is None and os.environ.get(HOME_ENV_VAR):
            settings_dir = Path(os.environ[HOME_ENV_VAR])
        if settings_dir is None:
            if os.name == "nt":  # Windows
                base = Path(os.environ.get("APPDATA", os.path.expanduser("~")))
                settings_dir = base / self.app_name
            else:  # Linux/Mac
                base = Path(os.path.expanduser("~"))
                settings_dir = base / f".{self.app_name}"

        settings_dir = Path(settings_dir)
        settings_dir.mkdir(parents=True, exist_ok=True)
        return settings_dir / "settings.json"

    def _load_settings(self) -> dict[str, Any]:
        """Load settings from file"""
        if self.settings_file.exists():
            try:
                with open(self.settings_file) as f:
                    settings = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                logger.warning(f"Ignoring unreadable settings file {self.settings_file}: {e}")
                return self._get_default_settings()
            if isinstance(settings, dict):
                return settings
            logger.warning(f"Ignoring malformed settings file {self.settings_file}")
        return self._get_default_settings()

    def _get_default_settings(self) -> dict[str, Any]:
        """Get default settings"""
        return {
            "reader": {
                "parsing_mode": ParsingMode.STRICT.value,
                "encoding": DEFAULT_ENCODING,
                "max_file_size": MAX_PALETTE_FILE_SIZE,
            },
            "logging": {
                "level": DEFAULT_LOG_LEVEL,
                "file": None,
            },
            "recent_files": [],
            "preferences": {
                "max_recent_files": 10,
            },
        }

    def save_settings(self):
        """Save current settings to file"""
        try:
            with open(self.settings_file, "w") as f:
                json.dump(self.settings, f, indent=2)
        except OSError as e:
            logger.warning(f"Could not save settings to {self.settings_file}: {e}")

    def get(self, key: str, default: Any = None) -> Any:
        """Get a setting value"""
        keys = key.split(".")
        value = self.settings
        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def set(self, key: str, value: Any):
        """Set a setting value"""
        keys = key.split(".")
        target = self.settings
        for k in keys[:-1]:
            if not isinstance(target.get(k), dict):
                target[k] = {}
            target = target[k]
        target[keys[-1]] = value
        self.save_settings()

    def get_parsing_mode(self) -> ParsingMode:
        """Get the configured parsing mode, falling back to strict"""
        name = self.get("reader.parsing_mode", ParsingMode.STRICT.value)
        try:
            return ParsingMode.from_name(name)
        except ValueError as e:
            logger.warning(f"{e}; using strict parsing")
            return ParsingMode.STRICT

    def set_parsing_mode(self, mode: ParsingMode):
        """Persist the default parsing mode"""
        self.set("reader.parsing_mode", ParsingMode.from_name(mode).value)

    def get_max_file_size(self) -> int:
        """Get the palette file size limit in bytes"""
        value = self.get("reader.max_file_size", MAX_PALETTE_FILE_SIZE)
        if isinstance(value, int) and value > 0:
            return value
        return MAX_PALETTE_FILE_SIZE

    def get_encoding(self) -> str:
        """Get the configured encoding for binary palette files"""
        value = self.get("reader.encoding", DEFAULT_ENCODING)
        if isinstance(value, str):
            try:
                codecs.lookup(value)
                return value
            except LookupError:
                pass
        logger.warning(f"Unusable encoding setting {value!r}; using {DEFAULT_ENCODING}")
        return DEFAULT_ENCODING

    def get_log_level(self) -> str:
        """Get the configured log level name"""
        value = self.get("logging.level", DEFAULT_LOG_LEVEL)
        if isinstance(value, str) and value.strip():
            return value
        return DEFAULT_LOG_LEVEL

    def get_log_file(self) -> Optional[str]:
        """Get the configured log file path, or None for console only"""
        value = self.get("logging.file")
        if isinstance(value, str) and value:
            return value
        return None

    def add_recent_file(self, file_path: str):
        """Add a file to the recent files list"""
        # Ensure file_path is a string (not Path object) for JSON serialization
        file_path = str(file_path)

        recent_list = self.settings.get("recent_files")
        if not isinstance(recent_list, list):
            recent_list = []

        if file_path in recent_list:
            recent_list.remove(file_path)

        recent_list.insert(0, file_path)

        max_recent = self.get("preferences.max_recent_files", 10)
        self.settings["recent_files"] = recent_list[:max_recent]

        self.save_settings()

    def get_recent_files(self) -> list:
        """Get recently read palette files"""
        return list(self.settings.get("recent_files", []))

    def reset_settings(self):
        """Reset all settings to defaults"""
        self.settings = self._get_default_settings()
        self.save_settings()


# Singleton instance
_settings_instance = None


def get_settings() -> SettingsManager:
    """Get the singleton settings instance"""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = SettingsManager()
    return _settings_instance


def reset_settings_instance():
    """Drop the singleton so the next get_settings() reloads from disk"""
    global _settings_instance
    _settings_instance = None
