"""
Chart config persistence (platformdirs + JSON).

Persisted items (schema v1):
- chart_config: ChartConfig dict representation

Behavior:
- If config file missing or unreadable -> defaults are used
- If schema_version mismatches:
  - default: reset to defaults
  - optional: keep loaded but update version
- Unknown keys in loaded JSON are ignored with warnings
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from platformdirs import user_config_dir

from boxplotchart.layout_engine.chart_config import ChartConfig
from boxplotchart.utils.logging import get_logger

logger = get_logger(__name__)

# Increment when you make a breaking change to the on-disk JSON schema.
SCHEMA_VERSION: int = 1


@dataclass
class ChartConfigData:
    """
    JSON-serializable config payload.

    Schema v1:
    - chart_config: Dict[str, Any] - ChartConfig dict
    """
    schema_version: int = SCHEMA_VERSION
    chart_config: Dict[str, Any] = field(default_factory=lambda: ChartConfig().to_dict())

    def to_json_dict(self) -> Dict[str, Any]:
        return {
            "schema_version": self.schema_version,
            "chart_config": self.chart_config,
        }

    @classmethod
    def from_json_dict(cls, d: Dict[str, Any]) -> "ChartConfigData":
        """
        Tolerant loader:
        - ignores unknown keys
        - tolerates a missing or malformed chart_config (defaults used)
        - treats a malformed schema_version as a version mismatch
        """
        try:
            schema_version = int(d.get("schema_version", -1))
        except (TypeError, ValueError, OverflowError):
            logger.warning(f"Invalid schema_version {d.get('schema_version')!r} in chart config file")
            schema_version = -1

        chart_config = ChartConfig().to_dict()
        raw = d.get("chart_config")
        if isinstance(raw, dict):
            chart_config = raw
        elif raw is not None:
            logger.warning("chart_config is not a dict, using defaults")

        known_keys = {"schema_version", "chart_config"}
        for key in d.keys():
            if key not in known_keys:
                logger.warning(f"Unknown key '{key}' in chart config file, ignoring")

        return cls(schema_version=schema_version, chart_config=chart_config)


class ChartConfigStore:
    """
    Manager for loading/saving ChartConfigData to disk.
    """

    def __init__(self, *, path: Path, data: Optional[ChartConfigData] = None):
        self.path = path
        self.data = data if data is not None else ChartConfigData()

    @staticmethod
    def default_config_path(
        app_name: str = "boxplotchart",
        filename: str = "chart_config.json",
        app_author: str | None = None,
    ) -> Path:
        """
        Determine OS-appropriate per-user config path.

        macOS:   ~/Library/Application Support/boxplotchart/chart_config.json
        Linux:   ~/.config/boxplotchart/chart_config.json
        Windows: %APPDATA%\\boxplotchart\\chart_config.json
        """
        d = Path(user_config_dir(app_name, app_author))
        d.mkdir(parents=True, exist_ok=True)
        return d / filename

    @classmethod
    def load(
        cls,
        *,
        config_path: Optional[Path] = None,
        app_name: str = "boxplotchart",
        filename: str = "chart_config.json",
        app_author: str | None = None,
        schema_version: int = SCHEMA_VERSION,
        reset_on_version_mismatch: bool = True,
        create_if_missing: bool = False,
    ) -> "ChartConfigStore":
        """
        Load config from disk.

        If file doesn't exist or is unreadable -> defaults.
        If schema mismatch:
          - reset_on_version_mismatch=True -> defaults
          - else -> keep loaded but overwrite schema_version

        If create_if_missing=True and file is missing -> immediately write defaults.
        """
        path = config_path or cls.default_config_path(app_name=app_name, filename=filename, app_author=app_author)
        default_data = ChartConfigData(schema_version=schema_version)

        try:
            raw = path.read_text(encoding="utf-8")
            parsed = json.loads(raw)
            if not isinstance(parsed, dict):
                logger.warning(f"Chart config file at {path} does not contain a dict, using defaults")
                return cls(path=path, data=default_data)

            loaded = ChartConfigData.from_json_dict(parsed)

            if int(loaded.schema_version) != int(schema_version):
                if reset_on_version_mismatch:
                    logger.warning(
                        f"Chart config schema version mismatch: loaded={loaded.schema_version}, "
                        f"expected={schema_version}, resetting to defaults"
                    )
                    store = cls(path=path, data=default_data)
                    if create_if_missing:
                        store.save()
                    return store
                loaded.schema_version = int(schema_version)

            return cls(path=path, data=loaded)
        except FileNotFoundError:
            logger.debug(f"Chart config file not found at {path}, using defaults")
            store = cls(path=path, data=default_data)
            if create_if_missing:
                store.save()
            return store
        except json.JSONDecodeError as e:
            logger.warning(f"Chart config file at {path} is not valid JSON: {e}, using defaults")
            return cls(path=path, data=default_data)
        except OSError as e:
            logger.warning(f"Error reading chart config from {path}: {e}, using defaults")
            return cls(path=path, data=default_data)

    def save(self) -> None:
        """Write config to disk."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            json_str = json.dumps(self.data.to_json_dict(), indent=2)
            self.path.write_text(json_str, encoding="utf-8")
            logger.info(f"Saved chart config to {self.path}")
        except OSError as e:
            logger.error(f"Error saving chart config to {self.path}: {e}")
            raise

    def get_chart_config(self) -> ChartConfig:
        """ChartConfig from the stored dict; defaults if it cannot be deserialized."""
        try:
            return ChartConfig.from_dict(self.data.chart_config)
        except (TypeError, ValueError) as e:
            logger.warning(f"Error deserializing ChartConfig from config: {e}, using defaults")
            return ChartConfig()

    def set_chart_config(self, config: ChartConfig) -> None:
        self.data.chart_config = config.to_dict()
