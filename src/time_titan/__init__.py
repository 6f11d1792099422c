"""Time Titan punch-clock dashboard package.

This package is organized by feature modules (punches, employees, teams,
dashboard) with a thin Flask JSON controller layer over service/repository
layers. The metric derivations live in ``metrics`` as pure functions.
"""
from __future__ import annotations

from .main import create_app

__all__ = ["create_app"]
