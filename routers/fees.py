from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.db import get_db
from models.fees import FeeLedger as FeeLedgerModel
from models.students import Student as StudentModel
from schemas.fees import FeeLedger, FeeLedgerCreate, FeePaymentCreate, LedgerStatus
from services.exceptions import InvalidInput, NotFoundError
from services.fee_service import apply_payment, fee_analytics, ledger_status

router = APIRouter(prefix="/fees", tags=["fee ledger"])


def _get_ledger(db: Session, ledger_id: int) -> FeeLedgerModel:
    ledger = db.query(FeeLedgerModel).filter(FeeLedgerModel.id == ledger_id).first()
    if ledger is None:
        raise NotFoundError("Fee ledger", ledger_id)
    return ledger


# ==========================================================
# [1단계] 원장 CRUD
# ==========================================================

# ✅ [CREATE] 학생 학기 수납 원장 생성
@router.post("/ledgers")
def create_ledger(payload: FeeLedgerCreate, db: Session = Depends(get_db)):
    student = db.query(StudentModel).filter(StudentModel.id == payload.student_id).first()
    if student is None:
        raise NotFoundError("Student", payload.student_id)

    duplicate = db.query(FeeLedgerModel).filter(
        FeeLedgerModel.student_id == payload.student_id,
        FeeLedgerModel.term == payload.term,
        FeeLedgerModel.academic_year == payload.academic_year,
    ).first()
    if duplicate:
        raise InvalidInput(f"Ledger already exists for student {student.id} in {payload.term} {payload.academic_year}")

    ledger = FeeLedgerModel(
        **payload.model_dump(),
        student_name=student.full_name,
        paid_amount=0,
        balance=payload.total_fees,
        status=ledger_status(payload.total_fees, 0),
    )
    db.add(ledger)
    db.commit()
    db.refresh(ledger)
    return {
        "success": True,
        "data": FeeLedger.model_validate(ledger).model_dump(),
        "message": "Fee ledger created successfully"
    }


# ✅ [READ] 원장 목록 (반/상태 필터)
@router.get("/ledgers")
def read_ledgers(class_id: int = None, status: LedgerStatus = None, db: Session = Depends(get_db)):
    query = db.query(FeeLedgerModel)
    if class_id is not None:
        query = query.filter(FeeLedgerModel.class_id == class_id)
    if status is not None:
        query = query.filter(FeeLedgerModel.status == status)

    records = query.order_by(FeeLedgerModel.student_name).all()
    return {
        "success": True,
        "data": [FeeLedger.model_validate(r).model_dump() for r in records],
        "summary": fee_analytics(records).model_dump()
    }


# ✅ [READ] 원장 상세 (납부 내역 포함)
@router.get("/ledgers/{ledger_id}")
def read_ledger(ledger_id: int, db: Session = Depends(get_db)):
    ledger = _get_ledger(db, ledger_id)
    return {"success": True, "data": FeeLedger.model_validate(ledger).model_dump()}


# ==========================================================
# [2단계] 납부
# ==========================================================

# ✅ [PAYMENT] 납부 등록 → 납부액/잔액/상태 재계산
@router.post("/ledgers/{ledger_id}/payments")
def add_payment(ledger_id: int, payment: FeePaymentCreate, db: Session = Depends(get_db)):
    ledger = _get_ledger(db, ledger_id)
    apply_payment(ledger, payment)
    db.commit()
    db.refresh(ledger)
    return {
        "success": True,
        "data": FeeLedger.model_validate(ledger).model_dump(),
        "message": f"Payment {payment.receipt_number} recorded"
    }
