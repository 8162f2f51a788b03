from sqlalchemy import Boolean, Column, Date, Integer, String
from database.db import Base

class Student(Base):
    __tablename__ = "students"  # 학생 기본 정보 테이블

    id = Column(Integer, primary_key=True, index=True)               # 고유 학생 ID (Primary Key)
    first_name = Column(String(100), nullable=False)                # 이름
    last_name = Column(String(100), nullable=False)                 # 성
    middle_name = Column(String(100))                               # 중간 이름 (선택)
    ecz_number = Column(String(30), nullable=False, unique=True)    # ECZ 수험 등록 번호
    gender = Column(String(10), nullable=False)                     # 성별 (Male / Female)
    date_of_birth = Column(Date)                                    # 생년월일
    class_id = Column(Integer, nullable=False, index=True)          # 소속 반 ID (classes 테이블과 연동)
    class_name = Column(String(50), nullable=False)                 # 반 이름 (중복 저장, 예: Grade 10A)
    enrollment_date = Column(Date, nullable=False)                  # 입학일
    guardian_name = Column(String(100), nullable=False)             # 보호자 이름
    guardian_phone = Column(String(20), nullable=False)             # 보호자 연락처
    address = Column(String(200))                                   # 주소
    is_active = Column(Boolean, nullable=False, default=True)       # 소프트 삭제 플래그

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
