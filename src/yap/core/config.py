"""
Persistent settings for yap.

Settings live in ``config.yml`` inside the yap directory and are loaded every
time the CLI runs. Multiple vault directories can each carry their own file,
which is why a :class:`Configuration` remembers where it was loaded from.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

from .exceptions import ErrorKind, YapError
from .paths import CONFIG_FILE, default_root

logger = logging.getLogger(__name__)


@dataclass
class ConfigSettings:
    remote_url: str = ""
    session: str = ""

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "ConfigSettings":
        # missing keys keep their defaults, unknown keys are dropped
        data = data or {}
        known = {f.name for f in fields(cls)}
        return cls(**{k: "" if v is None else str(v) for k, v in data.items() if k in known})


class SettingKey(enum.Enum):
    REMOTE_URL = "remote_url"
    SESSION = "session"

    @classmethod
    def parse(cls, setting: str) -> Optional["SettingKey"]:
        """Return the key named ``setting`` or None when there is no such key."""
        try:
            return cls(setting)
        except ValueError:
            return None

    @classmethod
    def require(cls, setting: str) -> "SettingKey":
        key = cls.parse(setting)
        if key is None:
            raise YapError(ErrorKind.BAD_CONFIG_KEY, setting)
        return key


def _dump(settings: ConfigSettings, path: Path) -> None:
    try:
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(asdict(settings), f, default_flow_style=False)
    except OSError as exc:
        raise YapError.from_os_error(exc) from exc
    except yaml.YAMLError as exc:
        raise YapError.from_yaml_error(exc) from exc


class Configuration:
    def __init__(self, settings: ConfigSettings, store: Path):
        self.settings = settings
        self.store = store

    @staticmethod
    def init(directory: Path | str) -> None:
        """Create ``directory`` if needed and write default settings into it."""
        directory = Path(directory)
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise YapError.from_os_error(exc) from exc

        _dump(ConfigSettings(), directory / CONFIG_FILE)
        logger.debug("Wrote default settings to %s", directory / CONFIG_FILE)

    @classmethod
    def read(cls, directory: Path | str) -> "Configuration":
        store = Path(directory) / CONFIG_FILE
        try:
            with open(store, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as exc:
            raise YapError.from_os_error(exc) from exc
        except yaml.YAMLError as exc:
            raise YapError.from_yaml_error(exc) from exc

        if data is not None and not isinstance(data, dict):
            raise YapError(
                ErrorKind.SERIALIZATION,
                f"expected a mapping in {store}, got {type(data).__name__}",
            )
        return cls(ConfigSettings.from_dict(data), store)

    def get_key(self, key: SettingKey) -> str:
        return getattr(self.settings, key.value)

    def set_key(self, key: SettingKey, value: str) -> None:
        setattr(self.settings, key.value, value)

    def save(self) -> None:
        _dump(self.settings, self.store)
        logger.debug("Saved settings to %s", self.store)


def init() -> None:
    """Initialize a Configuration in the default directory."""
    Configuration.init(default_root())


def read() -> Configuration:
    """Read the Configuration from the default directory."""
    return Configuration.read(default_root())
