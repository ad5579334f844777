from __future__ import annotations

import sys
from pathlib import Path

# Ensure the repository root is on sys.path before importing project modules
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))
