from sqlalchemy.orm import Session

import models  # noqa: F401  (모든 테이블을 Base.metadata에 등록)
from database.db import Base, SessionLocal, engine
from models.assessment_types import AssessmentType as AssessmentTypeModel

# ✅ 기본 ECZ 평가 유형 (가중치 합계 100)
DEFAULT_ASSESSMENT_TYPES = [
    {"name": "Continuous Assessment", "code": "CA", "weightage": 30, "max_marks": 30, "order": 1},
    {"name": "Midterm", "code": "MID", "weightage": 20, "max_marks": 20, "order": 2},
    {"name": "End of Term", "code": "EOT", "weightage": 50, "max_marks": 100, "order": 3},
]


def init_db():
    Base.metadata.create_all(bind=engine)

    db: Session = SessionLocal()
    try:
        if db.query(AssessmentTypeModel).count() == 0:
            for data in DEFAULT_ASSESSMENT_TYPES:
                db.add(AssessmentTypeModel(**data, is_active=True))
            db.commit()
            print("✅ 기본 평가 유형 생성 완료")
    finally:
        db.close()
    print("✅ 테이블 생성 완료")

if __name__ == "__main__":
    init_db()
