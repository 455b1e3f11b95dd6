"""Exceptions raised while resolving and announcing this host."""


class AnnouncerError(Exception):
    """Base class for every failure that aborts an announcement."""


class HostLookupError(AnnouncerError):
    """The OS hostname could not be determined."""


class IPEnumerationError(AnnouncerError):
    """Listing the local interface addresses failed."""


# Older name for the same failure.
IPNotFoundError = IPEnumerationError


class NoUsableAddressError(AnnouncerError):
    """Every local address was filtered out, or there were none."""


class TransportError(AnnouncerError):
    """The registry could not be reached."""


class AnnounceFailedError(AnnouncerError):
    """The registry answered with something other than 200 OK."""

    def __init__(self, status_code: int):
        super().__init__(f"announce failed with status {status_code}")
        self.status_code = status_code
