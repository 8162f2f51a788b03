from pydantic import BaseModel, Field
from typing import List, Literal
from datetime import date

PaymentMethod = Literal["Cash", "Bank Transfer", "Mobile Money"]
LedgerStatus = Literal["Paid", "Partial", "Unpaid"]


# ✅ 원장 생성
class FeeLedgerCreate(BaseModel):
    student_id: int
    class_id: int
    academic_year: str = Field(..., min_length=4)
    term: str = Field(..., min_length=1)
    total_fees: float = Field(..., ge=0)


# ✅ 납부 등록
class FeePaymentCreate(BaseModel):
    amount: float = Field(..., ge=1)
    payment_date: date
    payment_method: PaymentMethod
    receipt_number: str = Field(..., min_length=1)
    received_by: str = Field(..., min_length=1)


class FeePayment(FeePaymentCreate):
    id: int

    class Config:
        from_attributes = True


class FeeLedger(BaseModel):
    id: int
    student_id: int
    student_name: str
    class_id: int
    academic_year: str
    term: str
    total_fees: float
    paid_amount: float
    balance: float
    status: LedgerStatus
    payments: List[FeePayment] = []

    class Config:
        from_attributes = True


class FeeAnalytics(BaseModel):
    total_expected: float
    total_collected: float
    total_outstanding: float
    collection_rate: int
