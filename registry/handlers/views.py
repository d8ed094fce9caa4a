"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Read the caller address from the gateway header
- Call the registry for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import structlog
from django.conf import settings
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from registry.credentials import CredentialOracleUnavailableError
from registry.domain import MAX_ADDRESS_LENGTH
from registry.domain.errors import DomainError, ErrorCode, InvalidAddressError
from registry.handlers.serializers import (
    AttendanceRecordSerializer,
    CheckInSerializer,
    EventCreateSerializer,
    EventSerializer,
)
from registry.services import get_event_registry

logger = structlog.get_logger(__name__)

ERROR_STATUS = {
    ErrorCode.INVALID_ADDRESS: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_NFT_ADDRESS: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EVENT_NAME_REQUIRED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.LOCATION_REQUIRED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.DETAILS_REQUIRED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_START_TIME: status.HTTP_400_BAD_REQUEST,
    ErrorCode.MAX_PARTICIPANTS_REQUIRED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.NOT_EVENT_ORGANIZER: status.HTTP_403_FORBIDDEN,
    ErrorCode.NFT_REQUIRED_FOR_EVENT: status.HTTP_403_FORBIDDEN,
    ErrorCode.EVENT_DOES_NOT_EXIST: status.HTTP_404_NOT_FOUND,
    ErrorCode.ALREADY_REGISTERED: status.HTTP_409_CONFLICT,
    ErrorCode.REGISTRATION_CLOSED: status.HTTP_409_CONFLICT,
    ErrorCode.EVENT_CANCELLED: status.HTTP_409_CONFLICT,
    ErrorCode.EVENT_ALREADY_CANCELLED: status.HTTP_409_CONFLICT,
    ErrorCode.USER_NOT_REGISTERED: status.HTTP_409_CONFLICT,
}


class RegistryView(APIView):
    """Base handler translating registry failures into error responses."""

    def caller(self, request: Request) -> str:
        address = request.headers.get(settings.REGISTRY_PRINCIPAL_HEADER, "").strip()
        if not address or len(address) > MAX_ADDRESS_LENGTH:
            raise InvalidAddressError()
        return address

    def handle_exception(self, exc: Exception) -> Response:
        if isinstance(exc, DomainError):
            return Response(
                {"code": exc.code.value, "message": exc.message},
                status=ERROR_STATUS[exc.code],
            )
        if isinstance(exc, CredentialOracleUnavailableError):
            logger.warning("credential_oracle_unavailable_response", path=self.request.path)
            return Response(
                {"code": "CREDENTIAL_ORACLE_UNAVAILABLE", "message": "Credential check is unavailable"},
                status=status.HTTP_503_SERVICE_UNAVAILABLE,
            )
        return super().handle_exception(exc)


class EventListView(RegistryView):
    """Handler for GET/POST /api/events"""

    def get(self, request: Request) -> Response:
        events = get_event_registry().list_events()
        return Response(EventSerializer(events, many=True).data)

    def post(self, request: Request) -> Response:
        caller = self.caller(request)
        payload = EventCreateSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        event_id = get_event_registry().create_event(caller, **payload.validated_data)
        return Response({"id": event_id.value}, status=status.HTTP_201_CREATED)


class EventDetailView(RegistryView):
    """Handler for GET /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        event = get_event_registry().get_event(event_id)
        return Response(EventSerializer(event).data)


class RegistrationView(RegistryView):
    """Handler for POST /api/events/{event_id}/registrations"""

    def post(self, request: Request, event_id: str) -> Response:
        get_event_registry().register_for_event(self.caller(request), event_id)
        return Response(status=status.HTTP_201_CREATED)


class ParticipantListView(RegistryView):
    """Handler for GET /api/events/{event_id}/participants"""

    def get(self, request: Request, event_id: str) -> Response:
        participants = get_event_registry().get_event_participants(self.caller(request), event_id)
        return Response({"participants": list(participants)})


class AttendanceListView(RegistryView):
    """Handler for GET /api/events/{event_id}/attendance"""

    def get(self, request: Request, event_id: str) -> Response:
        records = get_event_registry().get_event_attendance(self.caller(request), event_id)
        return Response({"attendance": AttendanceRecordSerializer(records, many=True).data})


class CheckInView(RegistryView):
    """Handler for POST /api/events/{event_id}/check-ins"""

    def post(self, request: Request, event_id: str) -> Response:
        caller = self.caller(request)
        payload = CheckInSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        checked_in = get_event_registry().check_in_for_event(
            caller, event_id, payload.validated_data["participant"]
        )
        return Response(
            {"checked_in": checked_in},
            status=status.HTTP_201_CREATED if checked_in else status.HTTP_200_OK,
        )


class CancelEventView(RegistryView):
    """Handler for POST /api/events/{event_id}/cancel"""

    def post(self, request: Request, event_id: str) -> Response:
        get_event_registry().cancel_event(self.caller(request), event_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
