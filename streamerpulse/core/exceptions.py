class SiteException(Exception):
    """Base exception for site-related errors."""
    pass


class ContentNotFound(SiteException):
    """Raised when a news item, review, event or content block is not found."""
    pass


class EntryNotFound(SiteException):
    """Raised when no giveaway entry exists for an email."""
    pass


class DuplicateEntry(SiteException):
    """Raised when an email or affiliate user id is already registered."""
    pass


class AlreadySpun(SiteException):
    """Raised when a giveaway entry already has a prize recorded."""
    pass


class InvalidPeriod(SiteException):
    """Raised when a leaderboard period is not a valid YYYY-MM month."""
    pass


class InvalidContentType(SiteException):
    """Raised when a content or review type is not one of the known kinds."""
    pass


class Unauthorized(SiteException):
    """Raised when a privileged endpoint is called without a valid token."""
    pass


class UpstreamError(Exception):
    """Base exception for wagering API failures."""
    pass


class FetchFailed(UpstreamError):
    """Raised when every attempt against the wagering API failed."""

    def __init__(self, url: str, attempts: int, last_error=None, last_status=None):
        self.url = url
        self.attempts = attempts
        self.last_error = last_error
        self.last_status = last_status
        reason = f"status {last_status}" if last_status is not None else str(last_error)
        super().__init__(f"Failed to fetch {url} after {attempts} attempts: {reason}")


class MalformedResponse(UpstreamError):
    """Raised when the wagering API returns a body that is not JSON."""
    pass


class CacheWriteFailure(Exception):
    """Raised when a leaderboard cycle could not be persisted."""
    pass
