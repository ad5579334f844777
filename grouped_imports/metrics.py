from __future__ import annotations

import json
import threading
import time
from pathlib import Path
from typing import Dict


class MetricsCollector:
    def __init__(self) -> None:
        self.start = time.time()
        self.rule_counts: Dict[str, int] = {}
        self.files = 0
        self.cache_hits = 0
        self.failures = 0
        self.corrections = 0
        self._lock = threading.Lock()

    def file_scanned(self) -> None:
        with self._lock:
            self.files += 1

    def cache_hit(self) -> None:
        with self._lock:
            self.cache_hits += 1

    def file_failed(self) -> None:
        with self._lock:
            self.failures += 1

    def corrected(self, count: int) -> None:
        with self._lock:
            self.corrections += count

    def record(self, rule: str, count: int) -> None:
        if count:
            with self._lock:
                self.rule_counts[rule] = self.rule_counts.get(rule, 0) + count

    def finish(self) -> None:
        self.runtime = time.time() - self.start

    def to_dict(self) -> Dict[str, object]:
        return {
            "files": self.files,
            "cache_hits": self.cache_hits,
            "failures": self.failures,
            "corrections": self.corrections,
            "runtime": round(getattr(self, "runtime", 0), 3),
            "rules": dict(self.rule_counts),
        }

    def write_json(self, path: Path) -> None:
        path.write_text(json.dumps(self.to_dict(), indent=2))
