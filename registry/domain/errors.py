"""Domain error codes for the registry module.

Every rejected operation raises exactly one of these. None of them leave partial state.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_ADDRESS = "INVALID_ADDRESS"
    INVALID_NFT_ADDRESS = "INVALID_NFT_ADDRESS"
    EVENT_NAME_REQUIRED = "EVENT_NAME_REQUIRED"
    LOCATION_REQUIRED = "LOCATION_REQUIRED"
    DETAILS_REQUIRED = "DETAILS_REQUIRED"
    INVALID_START_TIME = "INVALID_START_TIME"
    MAX_PARTICIPANTS_REQUIRED = "MAX_PARTICIPANTS_REQUIRED"
    EVENT_DOES_NOT_EXIST = "EVENT_DOES_NOT_EXIST"
    NOT_EVENT_ORGANIZER = "NOT_EVENT_ORGANIZER"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    ALREADY_REGISTERED = "ALREADY_REGISTERED"
    REGISTRATION_CLOSED = "REGISTRATION_CLOSED"
    EVENT_CANCELLED = "EVENT_CANCELLED"
    NFT_REQUIRED_FOR_EVENT = "NFT_REQUIRED_FOR_EVENT"
    USER_NOT_REGISTERED = "USER_NOT_REGISTERED"
    EVENT_ALREADY_CANCELLED = "EVENT_ALREADY_CANCELLED"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidAddressError(DomainError):
    """Raised when the acting principal is missing."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ADDRESS,
            message="Caller address is required",
        )


class InvalidNFTAddressError(DomainError):
    """Raised when an event is created without a credential collection."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_NFT_ADDRESS,
            message="Required credential address is required",
        )


class EventNameRequiredError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NAME_REQUIRED,
            message="Event name is required",
        )


class LocationRequiredError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.LOCATION_REQUIRED,
            message="Event location is required",
        )


class DetailsRequiredError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.DETAILS_REQUIRED,
            message="Event details are required",
        )


class InvalidStartTimeError(DomainError):
    """Raised when an event would not start before it ends."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_START_TIME,
            message="Start time must be before end time",
        )


class MaxParticipantsRequiredError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.MAX_PARTICIPANTS_REQUIRED,
            message="Maximum participants must be greater than zero",
        )


class EventDoesNotExistError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: object) -> None:
        super().__init__(
            code=ErrorCode.EVENT_DOES_NOT_EXIST,
            message="Event does not exist",
        )
        self.event_id = event_id


class NotEventOrganizerError(DomainError):
    """Raised when someone other than the organizer administers an event."""

    def __init__(self, event_id: object) -> None:
        super().__init__(
            code=ErrorCode.NOT_EVENT_ORGANIZER,
            message="Only the event organizer can perform this action",
        )
        self.event_id = event_id


class InvalidEventIdError(DomainError):
    """Raised when an event ID is malformed, non-positive or unknown."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID",
        )


class AlreadyRegisteredError(DomainError):
    def __init__(self, event_id: object) -> None:
        super().__init__(
            code=ErrorCode.ALREADY_REGISTERED,
            message="Already registered for this event",
        )
        self.event_id = event_id


class RegistrationClosedError(DomainError):
    def __init__(self, event_id: object) -> None:
        super().__init__(
            code=ErrorCode.REGISTRATION_CLOSED,
            message="Registration is closed for this event",
        )
        self.event_id = event_id


class EventCancelledError(DomainError):
    """Raised when registering for or checking into a cancelled event."""

    def __init__(self, event_id: object) -> None:
        super().__init__(
            code=ErrorCode.EVENT_CANCELLED,
            message="Event has been cancelled",
        )
        self.event_id = event_id


class NFTRequiredForEventError(DomainError):
    """Raised when the caller holds none of the event's required credential."""

    def __init__(self, event_id: object) -> None:
        super().__init__(
            code=ErrorCode.NFT_REQUIRED_FOR_EVENT,
            message="The required credential is needed to register",
        )
        self.event_id = event_id


class UserNotRegisteredError(DomainError):
    def __init__(self, event_id: object) -> None:
        super().__init__(
            code=ErrorCode.USER_NOT_REGISTERED,
            message="User is not registered for this event",
        )
        self.event_id = event_id


class EventAlreadyCancelledError(DomainError):
    def __init__(self, event_id: object) -> None:
        super().__init__(
            code=ErrorCode.EVENT_ALREADY_CANCELLED,
            message="Event is already cancelled",
        )
        self.event_id = event_id
