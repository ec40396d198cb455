from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from alertsink.s3_copy.location import LocationDescriptor


class AlertSinkError(Exception):
    """Base class for errors raised while handling an alert sink copy."""


class EmptyNotificationError(AlertSinkError):
    """The event carries no record that can be processed."""


class CopyError(AlertSinkError):
    """S3 failed to copy the object to the sink."""

    def __init__(
        self,
        message: str,
        location: Optional["LocationDescriptor"] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.location = location
        self.cause = cause
