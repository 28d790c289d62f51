r"""Exponential backoff strategy."""

from __future__ import annotations

__all__ = ["ExponentialBackoff"]


class ExponentialBackoff:
    """Exponential backoff strategy.

    Calculates delay as: base_delay * (multiplier ** attempt), with an
    optional max_delay cap.

    Args:
        base_delay: The delay in seconds before the first retry.
        max_delay: Optional maximum delay cap in seconds. If specified,
            delays will not exceed this value.
        multiplier: Growth factor applied for each attempt. Must be >= 1
            so that the delay sequence never decreases.

    Example:
        ```pycon
        >>> from allscreenshots.backoff import ExponentialBackoff
        >>> backoff = ExponentialBackoff(base_delay=1.0)
        >>> backoff.calculate(0)
        1.0
        >>> backoff.calculate(3)
        8.0
        >>> backoff = ExponentialBackoff(base_delay=1.0, max_delay=30.0)
        >>> backoff.calculate(10)  # Would be 1024.0, but capped
        30.0

        ```
    """

    def __init__(
        self, base_delay: float = 1.0, max_delay: float | None = None, multiplier: float = 2.0
    ) -> None:
        if base_delay < 0:
            msg = f"base_delay must be non-negative, got {base_delay}"
            raise ValueError(msg)
        if max_delay is not None and max_delay < 0:
            msg = f"max_delay must be non-negative if specified, got {max_delay}"
            raise ValueError(msg)
        if multiplier < 1:
            msg = f"multiplier must be >= 1, got {multiplier}"
            raise ValueError(msg)

        self.base_delay = base_delay
        self.max_delay = max_delay
        self.multiplier = multiplier

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(base_delay={self.base_delay}, "
            f"max_delay={self.max_delay}, multiplier={self.multiplier})"
        )

    def calculate(self, attempt: int) -> float:
        """Calculate exponential backoff delay.

        Args:
            attempt: The attempt number that just failed (0-indexed).

        Returns:
            The calculated delay: base_delay * (multiplier ** attempt),
            capped at max_delay if set.
        """
        if self.base_delay == 0:
            return 0.0
        if self.max_delay is not None and self.base_delay >= self.max_delay:
            return float(self.max_delay)
        try:
            delay = self.base_delay * (self.multiplier**attempt)
        except OverflowError:
            delay = float("inf")
        if self.max_delay is not None:
            delay = min(delay, self.max_delay)
        return float(delay)
