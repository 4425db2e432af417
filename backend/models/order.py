from sqlalchemy import Column, Integer, String, Numeric, ForeignKey, DateTime, CheckConstraint, func
from sqlalchemy.orm import relationship
from database import Base

class Order(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)
    # Guest orders carry the configured sentinel id, which need not match a users row
    user_id = Column(Integer, nullable=True, index=True)
    total = Column(Numeric(10, 2), CheckConstraint("total >= 0"), nullable=False)
    status = Column(String, nullable=False, default="pending")
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)

    items = relationship(
        "OrderItem", back_populates="order", cascade="all, delete-orphan", order_by="OrderItem.id"
    )

class OrderItem(Base):
    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, index=True)
    order_id = Column(Integer, ForeignKey("orders.id"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False)
    quantity = Column(Integer, CheckConstraint("quantity > 0"), nullable=False)
    # Unit price captured at order time, later catalog changes do not touch it
    price = Column(Numeric(10, 2), CheckConstraint("price >= 0"), nullable=False)

    order = relationship("Order", back_populates="items")
    product = relationship("Product")
