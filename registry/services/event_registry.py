"""Event registry - all business logic lives here.

Services:
- Depend only on interfaces (stores, credential oracle)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or raise domain errors

Every mutation runs inside `EventStore.locked`, so checks and writes on one
event never interleave. Notifications go out after the locked block exits,
and a failing receiver is logged without failing the operation.
"""

from collections.abc import Callable
from datetime import datetime

import structlog
from django.utils import timezone

from registry import signals
from registry.credentials import CredentialOracle, CredentialOracleUnavailableError
from registry.domain import Address, AttendanceRecord, Capacity, Event, EventDraft, EventId
from registry.domain.errors import (
    AlreadyRegisteredError,
    DetailsRequiredError,
    EventAlreadyCancelledError,
    EventCancelledError,
    EventDoesNotExistError,
    EventNameRequiredError,
    InvalidAddressError,
    InvalidEventIdError,
    InvalidNFTAddressError,
    InvalidStartTimeError,
    LocationRequiredError,
    MaxParticipantsRequiredError,
    NFTRequiredForEventError,
    NotEventOrganizerError,
    RegistrationClosedError,
    UserNotRegisteredError,
)
from registry.stores import EventStore

logger = structlog.get_logger(__name__)

EventIdLike = EventId | int | str


def parse_event_id(value: EventIdLike) -> EventId | None:
    """Normalize an event id.

    Returns None for integers below 1, which can never name an event.

    Raises:
        InvalidEventIdError: If the value is not an integer or integer text.
    """
    if isinstance(value, EventId):
        return value
    if isinstance(value, str):
        try:
            return EventId.from_string(value)
        except ValueError:
            raise InvalidEventIdError() from None
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidEventIdError()
    return EventId(value) if value >= 1 else None


def _blank(value: str | None) -> bool:
    return value is None or not value.strip()


class EventRegistry:
    """Credential-gated event registration and attendance."""

    def __init__(
        self,
        store: EventStore,
        oracle: CredentialOracle,
        clock: Callable[[], datetime] = timezone.now,
    ) -> None:
        self._store = store
        self._oracle = oracle
        self._clock = clock

    def create_event(
        self,
        caller: Address | None,
        required_credential: Address | None,
        name: str,
        location: str,
        details: str,
        start_time: datetime,
        end_time: datetime,
        max_participants: int,
    ) -> EventId:
        """Create an event organized by `caller` and return its id.

        Raises:
            InvalidAddressError, InvalidNFTAddressError, EventNameRequiredError,
            LocationRequiredError, DetailsRequiredError, InvalidStartTimeError,
            MaxParticipantsRequiredError: on the first failing precondition.
        """
        if _blank(caller):
            raise InvalidAddressError()
        if _blank(required_credential):
            raise InvalidNFTAddressError()
        if _blank(name):
            raise EventNameRequiredError()
        if _blank(location):
            raise LocationRequiredError()
        if _blank(details):
            raise DetailsRequiredError()
        if not start_time < end_time:
            raise InvalidStartTimeError()
        if max_participants is None or max_participants <= 0:
            raise MaxParticipantsRequiredError()

        event = self._store.create_event(
            EventDraft(
                organizer=caller,
                required_credential=required_credential,
                name=name,
                location=location,
                details=details,
                start_time=start_time,
                end_time=end_time,
                max_participants=Capacity(max_participants),
                created_at=self._clock(),
            )
        )
        logger.info("event_created", event_id=event.id.value, organizer=caller)
        self._notify(signals.event_created, event_id=event.id, organizer=caller)
        return event.id

    def register_for_event(self, caller: Address, event_id: EventIdLike) -> None:
        """Register `caller` for an event.

        Capacity is advisory: registrations past `max_participants` are accepted.

        Raises:
            EventDoesNotExistError, AlreadyRegisteredError, RegistrationClosedError,
            EventCancelledError, NFTRequiredForEventError: on the first failing check.
            CredentialOracleUnavailableError: If the oracle could not answer.
        """
        parsed = parse_event_id(event_id)
        if parsed is None:
            raise EventDoesNotExistError(event_id)

        with self._store.locked(parsed) as event:
            if event is None:
                raise EventDoesNotExistError(event_id)
            if self._store.is_registered(event.id, caller):
                raise AlreadyRegisteredError(event.id)
            if event.registration_closed:
                raise RegistrationClosedError(event.id)
            if event.cancelled:
                raise EventCancelledError(event.id)
            if not self._holds_credential(event, caller):
                logger.info(
                    "registration_rejected",
                    event_id=event.id.value,
                    user=caller,
                    code="NFT_REQUIRED_FOR_EVENT",
                )
                raise NFTRequiredForEventError(event.id)
            self._store.add_participant(event.id, caller)

        logger.info("user_registered", event_id=parsed.value, user=caller)
        self._notify(signals.user_registered, event_id=parsed, user=caller)

    def get_event_participants(self, caller: Address, event_id: EventIdLike) -> tuple[Address, ...]:
        """Return participants in registration order. Organizer only.

        Raises:
            InvalidEventIdError: If the id is malformed or names no event.
            NotEventOrganizerError: If the caller did not create the event.
        """
        return self._organizer_view(caller, event_id).participants

    def get_event_attendance(self, caller: Address, event_id: EventIdLike) -> tuple[AttendanceRecord, ...]:
        """Return attendance records in check-in order. Organizer only.

        Raises:
            InvalidEventIdError: If the id is malformed or names no event.
            NotEventOrganizerError: If the caller did not create the event.
        """
        return self._organizer_view(caller, event_id).attendance

    def check_in_for_event(self, caller: Address, event_id: EventIdLike, participant: Address) -> bool:
        """Record that `participant` attended.

        Returns False without raising if the participant was already checked in.

        Raises:
            EventDoesNotExistError, NotEventOrganizerError, EventCancelledError,
            UserNotRegisteredError: on the first failing check.
        """
        parsed = parse_event_id(event_id)
        if parsed is None:
            raise EventDoesNotExistError(event_id)

        with self._store.locked(parsed) as event:
            if event is None:
                raise EventDoesNotExistError(event_id)
            if not event.is_organized_by(caller):
                raise NotEventOrganizerError(event.id)
            if event.cancelled:
                raise EventCancelledError(event.id)
            if not self._store.is_registered(event.id, participant):
                raise UserNotRegisteredError(event.id)
            if event.has_checked_in(participant):
                logger.info("check_in_duplicate", event_id=event.id.value, user=participant)
                return False
            self._store.add_attendance(event.id, AttendanceRecord(participant, self._clock()))

        logger.info("user_checked_in", event_id=parsed.value, user=participant)
        self._notify(signals.user_checked_in, event_id=parsed, user=participant)
        return True

    def cancel_event(self, caller: Address, event_id: EventIdLike) -> None:
        """Cancel an event. Irreversible.

        Raises:
            EventDoesNotExistError, NotEventOrganizerError, EventAlreadyCancelledError.
        """
        parsed = parse_event_id(event_id)
        if parsed is None:
            raise EventDoesNotExistError(event_id)

        with self._store.locked(parsed) as event:
            if event is None:
                raise EventDoesNotExistError(event_id)
            if not event.is_organized_by(caller):
                raise NotEventOrganizerError(event.id)
            if event.cancelled:
                raise EventAlreadyCancelledError(event.id)
            self._store.mark_cancelled(event.id)

        logger.info("event_cancelled", event_id=parsed.value, organizer=caller)
        self._notify(signals.event_cancelled, event_id=parsed)

    def has_required_credential(self, caller: Address, event_id: EventIdLike) -> bool:
        """Ask the oracle whether `caller` holds the event's credential."""
        return self._holds_credential(self.get_event(event_id), caller)

    def get_event(self, event_id: EventIdLike) -> Event:
        """Return an event snapshot.

        Raises:
            InvalidEventIdError: If the id is malformed.
            EventDoesNotExistError: If the event does not exist.
        """
        parsed = parse_event_id(event_id)
        event = self._store.get_event(parsed) if parsed is not None else None
        if event is None:
            raise EventDoesNotExistError(event_id)
        return event

    def list_events(self) -> list[Event]:
        return self._store.list_events()

    def is_registered(self, event_id: EventIdLike, principal: Address) -> bool:
        event = self.get_event(event_id)
        return self._store.is_registered(event.id, principal)

    def _organizer_view(self, caller: Address, event_id: EventIdLike) -> Event:
        parsed = parse_event_id(event_id)
        event = self._store.get_event(parsed) if parsed is not None else None
        # Existence before authority: an unknown id has no organizer to compare against.
        if event is None:
            raise InvalidEventIdError()
        if not event.is_organized_by(caller):
            raise NotEventOrganizerError(event.id)
        return event

    def _holds_credential(self, event: Event, caller: Address) -> bool:
        try:
            balance = self._oracle.balance_of(event.required_credential, caller)
        except CredentialOracleUnavailableError:
            logger.warning(
                "credential_oracle_unavailable",
                event_id=event.id.value,
                collection=event.required_credential,
            )
            raise
        return balance >= 1

    def _notify(self, signal, **kwargs) -> None:
        # State is already stored; a failing receiver must not fail the operation.
        for receiver, response in signal.send_robust(sender=self.__class__, **kwargs):
            if isinstance(response, Exception):
                logger.error(
                    "notification_receiver_failed",
                    receiver=getattr(receiver, "__qualname__", repr(receiver)),
                    error=repr(response),
                    exc_info=response,
                )
