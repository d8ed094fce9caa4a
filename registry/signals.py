"""Registry notifications.

Each signal is sent exactly once per successful operation, after the store
has applied the change. Receivers here forward them to the structured log
for monitoring and indexing.
"""

import structlog
from django.dispatch import Signal, receiver

logger = structlog.get_logger(__name__)

# kwargs: event_id, organizer
event_created = Signal()
# kwargs: event_id, user
user_registered = Signal()
# kwargs: event_id, user
user_checked_in = Signal()
# kwargs: event_id
event_cancelled = Signal()


@receiver(event_created)
def log_event_created(sender, event_id, organizer, **kwargs):
    logger.info("notification_event_created", event_id=event_id.value, organizer=organizer)


@receiver(user_registered)
def log_user_registered(sender, event_id, user, **kwargs):
    logger.info("notification_user_registered", event_id=event_id.value, user=user)


@receiver(user_checked_in)
def log_user_checked_in(sender, event_id, user, **kwargs):
    logger.info("notification_user_checked_in", event_id=event_id.value, user=user)


@receiver(event_cancelled)
def log_event_cancelled(sender, event_id, **kwargs):
    logger.info("notification_event_cancelled", event_id=event_id.value)
