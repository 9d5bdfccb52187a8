"""Nox entry point.

Session definitions live in ``pipelines/*.nox.py``; this file only loads them.
"""

from __future__ import annotations

import pathlib
import runpy
import sys

sys.path.append(".")

for session_file in sorted(pathlib.Path("pipelines").glob("*.nox.py")):
    runpy.run_path(str(session_file))
