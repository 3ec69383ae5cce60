"""
Entity definitions
Rooms (chambers), guests, rentals and the billing objects hanging off a rental
"""
from datetime import datetime
from enum import Enum
from sqlalchemy import (
    Column, Integer, String, DateTime, ForeignKey, Text, Table,
    Enum as SQLEnum, Boolean
)
from sqlalchemy.orm import relationship
from hotel_management.database import Base


# ============== Enums ==============

class PriceTier(int, Enum):
    """Price range used by the check-in room listing"""
    LOW = 1
    MID = 2
    HIGH = 3

    @classmethod
    def from_selector(cls, value: int) -> "PriceTier":
        """1 and 2 select LOW and MID; every other value falls back to HIGH"""
        if value == 1:
            return cls.LOW
        if value == 2:
            return cls.MID
        return cls.HIGH


class PaymentMethod(str, Enum):
    """Payment method"""
    CASH = "cash"
    CARD = "card"
    TRANSFER = "transfer"


# ============== Link tables ==============

rental_chambers = Table(
    "rental_chambers",
    Base.metadata,
    Column("rental_id", Integer, ForeignKey("rentals.id"), primary_key=True),
    Column("chamber_id", Integer, ForeignKey("chambers.id"), primary_key=True),
)


# ============== Entities ==============

class Chamber(Base):
    """
    Room record
    price_day is stored in currency minor units
    """
    __tablename__ = "chambers"

    id = Column(Integer, primary_key=True, index=True)
    chamber_number = Column(String(10), nullable=False)     # room number shown to staff
    chamber_type = Column(String(30), nullable=False)       # single / couple / family / ...
    is_vip = Column(Boolean, default=False)
    price_day = Column(Integer, nullable=False, default=0)
    chamber_area = Column(Integer)                          # square metres
    note = Column(Text)
    is_empty = Column(Boolean, default=True)                # False while occupied
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    rentals = relationship("Rental", secondary=rental_chambers, back_populates="chambers")


class Guest(Base):
    """
    Guest record
    id_card is the natural lookup key but is not enforced unique
    """
    __tablename__ = "guests"

    id = Column(Integer, primary_key=True, index=True)
    guest_name = Column(String(100))
    birth = Column(String(20))
    id_card = Column(String(30), index=True)
    passport = Column(String(30))
    address = Column(String(255))
    nationality = Column(String(50))
    phone_number = Column(String(20))
    email = Column(String(100))
    is_familiar = Column(Boolean, default=False)            # returning guest
    is_vip = Column(Boolean, default=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    rentals = relationship("Rental", back_populates="guest")


class Payment(Base):
    """Payment recorded when a rental is settled"""
    __tablename__ = "payments"

    id = Column(Integer, primary_key=True, index=True)
    method = Column(SQLEnum(PaymentMethod), nullable=False, default=PaymentMethod.CASH)
    amount = Column(Integer, nullable=False, default=0)
    note = Column(Text)
    created_at = Column(DateTime, default=datetime.utcnow)

    rental = relationship("Rental", back_populates="payment", uselist=False)


class Rental(Base):
    """
    Stay record - links one guest to the rooms taken at check-in
    An open rental has no check_out_date
    """
    __tablename__ = "rentals"

    id = Column(Integer, primary_key=True, index=True)
    guest_id = Column(Integer, ForeignKey("guests.id"), nullable=True)
    check_in_date = Column(DateTime, nullable=False)
    check_out_date = Column(DateTime)
    discount = Column(Integer, default=0)
    paid = Column(Boolean, default=False)
    note = Column(Text)
    payment_id = Column(Integer, ForeignKey("payments.id"), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    guest = relationship("Guest", back_populates="rentals")
    chambers = relationship("Chamber", secondary=rental_chambers, back_populates="rentals")
    payment = relationship("Payment", back_populates="rental")
    order_foods = relationship("OrderFood", back_populates="rental")
    service_bills = relationship("ServiceBill", back_populates="rental")

    @property
    def chamber_numbers(self):
        return [c.chamber_number for c in self.chambers]


class Category(Base):
    """Menu category"""
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    category_name = Column(String(100))

    food_items = relationship("FoodItem", back_populates="category")


class FoodItem(Base):
    """Menu item"""
    __tablename__ = "food_items"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    description = Column(Text)
    price = Column(Integer, nullable=False, default=0)
    image = Column(String(255))
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=True)

    category = relationship("Category", back_populates="food_items")

    @property
    def category_name(self):
        return self.category.category_name if self.category else None


class OrderFood(Base):
    """Food order charged to a rental"""
    __tablename__ = "order_foods"

    id = Column(Integer, primary_key=True, index=True)
    total_price = Column(Integer, nullable=False)
    people_number = Column(Integer, nullable=False)
    order_date = Column(String(30), nullable=False)
    discount = Column(Integer, default=0)
    note = Column(Text)
    rental_id = Column(Integer, ForeignKey("rentals.id"), nullable=False)

    rental = relationship("Rental", back_populates="order_foods")


class ServiceBill(Base):
    """Service (laundry, spa, transfer...) charged to a rental"""
    __tablename__ = "service_bills"

    id = Column(Integer, primary_key=True, index=True)
    order_date = Column(String(30), nullable=False)
    note = Column(Text)
    discount = Column(Integer, default=0)
    total_price = Column(Integer, nullable=False)
    rental_id = Column(Integer, ForeignKey("rentals.id"), nullable=False)

    rental = relationship("Rental", back_populates="service_bills")
