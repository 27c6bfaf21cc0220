class NewsRadarError(Exception):
    """Base class for errors shown to the user as a message."""


class NewsError(NewsRadarError):
    """Fetching or analyzing news failed."""


class AuthError(NewsRadarError):
    """Sign-up or log-in was rejected."""
