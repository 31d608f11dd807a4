from sqlalchemy import Column, String, Integer, Date, ForeignKey, CheckConstraint, Index
from sqlalchemy.orm import relationship
import uuid
from database import Base


def generate_uuid():
    return str(uuid.uuid4())


class Customer(Base):
    __tablename__ = 'customers'

    id = Column(String, primary_key=True, default=generate_uuid)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    image_url = Column(String, nullable=False)

    invoices = relationship("Invoice", back_populates="customer")

    __table_args__ = (
        Index('idx_customers_name', 'name'),
    )


class Invoice(Base):
    """
    A customer invoice.

    Amounts are stored in cents. Status is one of:
    - pending: Issued, awaiting payment
    - paid: Settled
    """
    __tablename__ = 'invoices'

    id = Column(String, primary_key=True, default=generate_uuid)
    customer_id = Column(String, ForeignKey('customers.id'), nullable=False)
    amount = Column(Integer, nullable=False)
    status = Column(String, nullable=False)
    date = Column(Date, nullable=False)

    customer = relationship("Customer", back_populates="invoices")

    __table_args__ = (
        CheckConstraint("status IN ('pending', 'paid')", name='check_invoice_status'),
        Index('idx_invoices_customer', 'customer_id'),
        Index('idx_invoices_date', 'date'),
    )


class Revenue(Base):
    __tablename__ = 'revenue'

    month = Column(String(4), primary_key=True)  # Jan, Feb, ...
    revenue = Column(Integer, nullable=False)  # Whole dollars
