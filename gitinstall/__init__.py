"""Detect the host Linux distribution and install Git with its package manager."""

from __future__ import annotations

__version__ = "1.0.0"
