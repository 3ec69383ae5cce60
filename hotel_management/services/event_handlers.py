"""
Event handlers
Audit trail for the check-in, ordering and check-out workflows
"""
import logging
from typing import List

from hotel_management.services.event_bus import event_bus, Event
from hotel_management.models.events import EventType

logger = logging.getLogger(__name__)
audit_logger = logging.getLogger("hotel_management.audit")


class EventHandlers:
    """Subscribes the audit handlers to the domain events"""

    def __init__(self):
        self._registered = False

    def handle_guest_checked_in(self, event: Event) -> None:
        data = event.data
        audit_logger.info(
            f"check-in rental={data.get('rental_id')} chamber={data.get('chamber_number')} "
            f"guest={data.get('guest_name')} new_guest={data.get('is_new_guest')}"
        )

    def handle_guest_checked_out(self, event: Event) -> None:
        data = event.data
        chambers: List[str] = data.get('chamber_numbers', [])
        audit_logger.info(
            f"check-out rental={data.get('rental_id')} chambers={','.join(chambers)} "
            f"amount={data.get('total_amount')} method={data.get('payment_method')}"
        )

    def handle_order_placed(self, event: Event) -> None:
        data = event.data
        audit_logger.info(
            f"{event.event_type.value} order={data.get('order_id')} rental={data.get('rental_id')} "
            f"total={data.get('total_price')} discount={data.get('discount')}"
        )

    def _bindings(self):
        return [
            (EventType.GUEST_CHECKED_IN, self.handle_guest_checked_in),
            (EventType.GUEST_CHECKED_OUT, self.handle_guest_checked_out),
            (EventType.FOOD_ORDERED, self.handle_order_placed),
            (EventType.SERVICE_ORDERED, self.handle_order_placed),
        ]

    def register_handlers(self, event_bus_instance=None) -> None:
        if self._registered:
            return

        bus = event_bus_instance or event_bus
        for event_type, handler in self._bindings():
            bus.subscribe(event_type, handler)

        self._registered = True
        logger.info("Event handlers registered successfully")

    def unregister_handlers(self, event_bus_instance=None) -> None:
        """Remove the handlers again (used by tests)"""
        bus = event_bus_instance or event_bus
        for event_type, handler in self._bindings():
            bus.unsubscribe(event_type, handler)

        self._registered = False
        logger.info("Event handlers unregistered")


event_handlers = EventHandlers()


def register_event_handlers():
    """Called once at application start-up"""
    event_handlers.register_handlers()
