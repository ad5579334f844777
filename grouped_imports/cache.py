from __future__ import annotations

import hashlib
import json
import logging
import threading
from pathlib import Path

from grouped_imports.config import LintConfig

logger = logging.getLogger(__name__)

CACHE_NAME = ".grouped_imports.cache"


def config_hash(cfg: LintConfig) -> str:
    return hashlib.sha1(json.dumps(cfg.to_dict(), sort_keys=True).encode()).hexdigest()


class LintCache:
    """Remembers files that were clean under the current configuration."""

    def __init__(self, root: Path, cfg: LintConfig, enabled: bool = True) -> None:
        self.root = root
        self.enabled = enabled
        self.cfg_hash = config_hash(cfg)
        self.path = root / CACHE_NAME
        self.data: dict[str, dict] = {}
        self._lock = threading.Lock()
        if enabled and self.path.exists():
            try:
                self.data = json.loads(self.path.read_text())
            except (OSError, ValueError):
                logger.warning("ignoring unreadable cache file %s", self.path)
                self.data = {}

    def is_valid(self, path: Path) -> bool:
        if not self.enabled:
            return False
        info = self.data.get(str(path))
        if not info or info.get("cfg") != self.cfg_hash:
            return False
        stat = path.stat()
        return info.get("mtime") == stat.st_mtime and info.get("size") == stat.st_size

    def update(self, path: Path) -> None:
        if not self.enabled:
            return
        stat = path.stat()
        with self._lock:
            self.data[str(path)] = {"mtime": stat.st_mtime, "size": stat.st_size, "cfg": self.cfg_hash}

    def discard(self, path: Path) -> None:
        with self._lock:
            self.data.pop(str(path), None)

    def save(self) -> None:
        if self.enabled:
            self.path.write_text(json.dumps(self.data, indent=2))
