r"""Backoff strategy used to space out retry attempts."""

from __future__ import annotations

__all__ = ["ExponentialBackoff"]

from allscreenshots.backoff.exponential import ExponentialBackoff
