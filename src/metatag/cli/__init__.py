"""Command-line interface for metatag."""
from __future__ import annotations
