from sqlalchemy import Column, Date, DateTime, Float, ForeignKey, Integer, String, func
from sqlalchemy.orm import relationship
from database.db import Base

class FeeLedger(Base):
    __tablename__ = "fee_ledgers"  # 학생별 학기 수납 원장

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(Integer, nullable=False, index=True)
    student_name = Column(String(200), nullable=False)
    class_id = Column(Integer, nullable=False, index=True)
    academic_year = Column(String(10), nullable=False)
    term = Column(String(20), nullable=False)
    total_fees = Column(Float, nullable=False)
    paid_amount = Column(Float, nullable=False, default=0)
    balance = Column(Float, nullable=False)
    status = Column(String(10), nullable=False, default="Unpaid")   # Paid / Partial / Unpaid
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    # ✅ 납부 내역 (1:N)
    payments = relationship(
        "FeePayment",
        back_populates="ledger",
        order_by="FeePayment.id",
        cascade="all, delete-orphan",
    )


class FeePayment(Base):
    __tablename__ = "fee_payments"

    id = Column(Integer, primary_key=True, index=True)
    ledger_id = Column(Integer, ForeignKey("fee_ledgers.id"), nullable=False)
    amount = Column(Float, nullable=False)
    payment_date = Column(Date, nullable=False)
    payment_method = Column(String(20), nullable=False)        # Cash / Bank Transfer / Mobile Money
    receipt_number = Column(String(50), nullable=False)
    received_by = Column(String(100), nullable=False)

    ledger = relationship("FeeLedger", back_populates="payments")
