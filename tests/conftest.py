"""Pytest bootstrap for local source imports.

The application is a set of top-level modules at the repository root; make
sure they import from the checkout even when pytest runs from elsewhere.
"""

from __future__ import annotations

import sys
from pathlib import Path


PROJECT_ROOT = Path(__file__).resolve().parent.parent
PROJECT_ROOT_STR = str(PROJECT_ROOT)

if PROJECT_ROOT_STR not in sys.path:
    sys.path.insert(0, PROJECT_ROOT_STR)
