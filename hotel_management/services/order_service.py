"""
Order service
Food orders and service bills charged to an open rental
"""
from typing import Callable, List
import logging
from sqlalchemy.orm import Session
from hotel_management.models.entities import Rental, OrderFood, ServiceBill
from hotel_management.models.schemas import OrderFoodCreate, OrderServiceCreate
from hotel_management.models.events import EventType, OrderPlacedData
from hotel_management.services.event_bus import event_bus, Event

logger = logging.getLogger(__name__)

FOOD_SUCCESS_MESSAGE = "Đặt món thành công!"
SERVICE_SUCCESS_MESSAGE = "Đặt dịch vụ thành công!"


class OrderService:
    """Order service"""

    def __init__(self, db: Session, event_publisher: Callable[[Event], None] = None):
        self.db = db
        self._publish_event = event_publisher or event_bus.publish

    def _get_open_rental(self, rental_id: int) -> Rental:
        rental = self.db.query(Rental).filter(Rental.id == rental_id).first()
        if not rental:
            raise ValueError("Phiếu thuê phòng không tồn tại")
        if rental.check_out_date is not None:
            raise ValueError("Phòng đã trả, không thể đặt thêm")
        return rental

    def add_order_food(self, data: OrderFoodCreate) -> OrderFood:
        rental = self._get_open_rental(data.rental_id)

        order = OrderFood(
            total_price=data.total_price,
            people_number=data.people_number,
            order_date=data.order_date,
            discount=data.discount,
            note=data.note,
            rental=rental,
        )
        self.db.add(order)
        self.db.commit()
        self.db.refresh(order)

        logger.info(f"Food order {order.id} added to rental {rental.id}")
        self._publish(EventType.FOOD_ORDERED, order.id, rental.id, order.total_price, order.discount)
        return order

    def add_order_service(self, data: OrderServiceCreate) -> ServiceBill:
        rental = self._get_open_rental(data.rental_id)

        bill = ServiceBill(
            order_date=data.order_date,
            note=data.note,
            discount=data.discount,
            total_price=data.total_price,
            rental=rental,
        )
        self.db.add(bill)
        self.db.commit()
        self.db.refresh(bill)

        logger.info(f"Service bill {bill.id} added to rental {rental.id}")
        self._publish(EventType.SERVICE_ORDERED, bill.id, rental.id, bill.total_price, bill.discount)
        return bill

    def get_order_foods(self, rental_id: int) -> List[OrderFood]:
        return self.db.query(OrderFood).filter(
            OrderFood.rental_id == rental_id
        ).order_by(OrderFood.id).all()

    def get_service_bills(self, rental_id: int) -> List[ServiceBill]:
        return self.db.query(ServiceBill).filter(
            ServiceBill.rental_id == rental_id
        ).order_by(ServiceBill.id).all()

    def _publish(self, event_type: EventType, order_id: int, rental_id: int,
                 total_price: int, discount: int) -> None:
        self._publish_event(Event.of(
            event_type,
            OrderPlacedData(
                order_id=order_id,
                rental_id=rental_id,
                total_price=total_price,
                discount=discount or 0,
            ),
            source="order_service"
        ))
