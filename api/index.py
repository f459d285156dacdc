"""
Support Relay - Vercel entry point.

Vercel serves the ``app`` object from this file.
"""
import sys
from pathlib import Path

# Vercel runs this file without installing the project
_base_path = Path(__file__).parent.parent
if str(_base_path) not in sys.path:
    sys.path.insert(0, str(_base_path))

from support_relay.app import app  # noqa: E402

__all__ = ["app"]
