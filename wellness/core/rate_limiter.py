"""
Rate Limiter - Control analyze requests per client.

Every analysis costs one LLM call, so the analyze endpoint is guarded
by a simple in-memory sliding window keyed by client IP.

For production with multiple instances, upgrade to a Redis-backed limiter.
"""
from datetime import datetime, timedelta
from typing import Dict, List, Optional, Tuple
import threading

from wellness.core.logging_config import get_logger

logger = get_logger(__name__)


class RateLimiter:
    """
    Simple sliding window rate limiter.

    A limit of 0 disables limiting entirely.

    Example:
        >>> limiter = RateLimiter(requests_per_minute=30)
        >>> limiter.is_allowed("203.0.113.7")
        (True, 29)
    """

    def __init__(
        self,
        requests_per_minute: int = 30,
        cleanup_interval_minutes: int = 5
    ):
        """
        Initialize the rate limiter.

        Args:
            requests_per_minute: Maximum requests allowed per minute
            cleanup_interval_minutes: How often to clean old entries
        """
        self.limit = requests_per_minute
        self.window = timedelta(minutes=1)
        self.cleanup_interval = timedelta(minutes=cleanup_interval_minutes)

        self._requests: Dict[str, List[datetime]] = {}
        self._lock = threading.RLock()
        self._last_cleanup = datetime.utcnow()

        logger.info(f"RateLimiter initialized: {requests_per_minute} requests/minute")

    @property
    def enabled(self) -> bool:
        return self.limit > 0

    def is_allowed(self, identifier: str) -> Tuple[bool, int]:
        """
        Check if a request is allowed for the given identifier.

        Args:
            identifier: Client IP address

        Returns:
            Tuple of (is_allowed, remaining_requests)
        """
        if not self.enabled:
            return True, 0

        with self._lock:
            self._maybe_cleanup()

            now = datetime.utcnow()
            cutoff = now - self.window

            recent = [t for t in self._requests.get(identifier, []) if t > cutoff]
            self._requests[identifier] = recent

            if len(recent) >= self.limit:
                logger.warning(f"Rate limit exceeded for client {identifier}")
                return False, 0

            recent.append(now)
            return True, self.limit - len(recent)

    def get_reset_time(self, identifier: str) -> datetime:
        """
        Get when the rate limit resets for an identifier.

        Returns:
            Datetime when the oldest request in the window expires
        """
        with self._lock:
            timestamps = self._requests.get(identifier)
            if not timestamps:
                return datetime.utcnow()
            return min(timestamps) + self.window

    def _maybe_cleanup(self) -> None:
        """Remove old entries periodically."""
        now = datetime.utcnow()

        if now - self._last_cleanup < self.cleanup_interval:
            return

        cutoff = now - self.window

        for identifier in list(self._requests.keys()):
            self._requests[identifier] = [
                t for t in self._requests[identifier] if t > cutoff
            ]
            if not self._requests[identifier]:
                del self._requests[identifier]

        self._last_cleanup = now
        logger.debug(f"Rate limiter cleanup: {len(self._requests)} active clients")


# Global rate limiter instance
_rate_limiter: Optional[RateLimiter] = None
_rate_limiter_lock = threading.Lock()


def get_rate_limiter() -> RateLimiter:
    """Get or create the global rate limiter (one instance across threads)."""
    global _rate_limiter
    if _rate_limiter is None:
        with _rate_limiter_lock:
            if _rate_limiter is None:
                from wellness.core.config import get_settings
                settings = get_settings()
                _rate_limiter = RateLimiter(
                    requests_per_minute=settings.rate_limit_per_minute
                )
    return _rate_limiter


def reset_rate_limiter() -> None:
    """Drop the global limiter so the next call re-reads settings."""
    global _rate_limiter
    with _rate_limiter_lock:
        _rate_limiter = None
