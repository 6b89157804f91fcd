"""Shared pytest setup.

Tests import `climaquery` straight from the checkout, so the repository root goes on `sys.path`
ahead of any installed copy.
"""

from __future__ import annotations

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))
