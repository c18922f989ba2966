from __future__ import annotations
import json, os
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Callable, List, Optional
from vouch.core.errors import UsageError
from vouch.core.logging import logger, LEVELS

SETTINGS_FILENAME = ".vouch.json"
SETTINGS_ENV = "VOUCH_SETTINGS"

@dataclass
class SettingsData:
    include_stack: bool = False    # anchor failures at the predicate instead of the expect() call site
    truncate_threshold: int = 40   # object display shortens values rendered at/over this width
    inspect_depth: int = 2         # nesting depth rendered by the inspector
    log_level: str = "INFO"        # DEBUG / INFO / WARN / ERROR

    def normalize(self):
        self.include_stack = bool(self.include_stack)
        if not isinstance(self.truncate_threshold, int) or self.truncate_threshold < 0:
            self.truncate_threshold = 40
        if not isinstance(self.inspect_depth, int) or self.inspect_depth < 1:
            self.inspect_depth = 2
        if self.log_level not in LEVELS:
            self.log_level = "INFO"

class Settings:
    def __init__(self, data: SettingsData, path: Optional[Path] = None):
        self.data = data
        self.path = path
        self._listeners: List[Callable[[SettingsData], None]] = []

    @classmethod
    def _resolve_path(cls) -> Optional[Path]:
        override = os.environ.get(SETTINGS_ENV)
        if override:
            return Path(override).expanduser()
        local = Path.cwd() / SETTINGS_FILENAME
        if local.exists():
            return local
        home = Path(os.path.expanduser("~")) / SETTINGS_FILENAME
        if home.exists():
            return home
        return None

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Settings":
        path = path or cls._resolve_path()
        if path is not None and path.exists():
            try:
                raw = json.loads(path.read_text(encoding="utf-8"))
                # Unknown keys are dropped so older/newer files still load
                field_names = {f.name for f in fields(SettingsData)}
                data = SettingsData(**{k: v for k, v in raw.items() if k in field_names})
                data.normalize()
                logger.set_level(data.log_level)  # type: ignore[arg-type]
                logger.debug("SettingsLoaded", path=str(path))
                return cls(data, path)
            except (OSError, ValueError, TypeError, AttributeError) as e:
                logger.warn("SettingsParseFailedUsingDefaults", path=str(path), error=str(e))
        data = SettingsData()
        data.normalize()
        return cls(data, path)

    def save(self, path: Optional[Path] = None):
        target = path or self.path or (Path.cwd() / SETTINGS_FILENAME)
        try:
            target.write_text(json.dumps(asdict(self.data), indent=2), encoding="utf-8")
            self.path = target
            logger.debug("SettingsSaved", path=str(target))
        except OSError as e:
            logger.error("SettingsSaveFailed", error=str(e))

    def update(self, **changes):
        known = {f.name for f in fields(SettingsData)}
        unknown = sorted(set(changes) - known)
        if unknown:
            raise UsageError(f"unknown setting(s): {', '.join(unknown)}")
        for name, value in changes.items():
            setattr(self.data, name, value)
        self.data.normalize()
        logger.set_level(self.data.log_level)  # type: ignore[arg-type]
        self._notify()

    def on_change(self, fn: Callable[[SettingsData], None]):
        self._listeners.append(fn)

    def _notify(self):
        for fn in self._listeners:
            fn(self.data)

settings = Settings.load()
