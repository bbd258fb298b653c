from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .errors import ConfigError
from .lib.env import DISK_TOOLS, KEYMAP_SUFFIX, PATHS


@dataclass(frozen=True)
class InstallerConfig:
    raw: Dict[str, Any] = field(default_factory=dict)

    @property
    def dry_run(self) -> bool:
        return bool(self.raw.get("dry_run", False))

    @property
    def log_path(self) -> str:
        return str(self.raw.get("log_path") or PATHS.log_default)

    @property
    def log_fallback_path(self) -> str:
        return str(Path(self.raw.get("log_fallback_path") or "blop-installer.log").resolve())

    @property
    def keymap_dir(self) -> str:
        return str(((self.raw.get("keyboard") or {}).get("keymap_dir")) or PATHS.keymap_dir)

    @property
    def keymap_pattern(self) -> str:
        return str(((self.raw.get("keyboard") or {}).get("pattern")) or "*" + KEYMAP_SUFFIX)

    @property
    def sort_layouts(self) -> bool:
        return bool((self.raw.get("keyboard") or {}).get("sort_layouts", False))

    @property
    def disk_tools(self) -> List[str]:
        tools = (self.raw.get("disks") or {}).get("tools")
        return [str(t) for t in tools] if tools else list(DISK_TOOLS)

    def with_overrides(self, **overrides: Any) -> "InstallerConfig":
        """Return a copy with top-level keys replaced (None values are ignored)."""

        raw = dict(self.raw)
        raw.update({k: v for k, v in overrides.items() if v is not None})
        return InstallerConfig(raw=raw)


def load_installer_config(path: Optional[str] = None) -> InstallerConfig:
    """Load the YAML installer config.

    Without an explicit path the default location is tried and silently
    skipped when absent; an explicit path must exist.
    """

    if path is None:
        p = Path(PATHS.config_default)
        if not p.exists():
            return InstallerConfig()
    else:
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(path)

    if p.suffix.lower() not in {".yaml", ".yml"}:
        raise ConfigError(f"installer config must be YAML: {p}")

    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML in {p}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{p} must contain a mapping/object")

    return InstallerConfig(raw=raw)
