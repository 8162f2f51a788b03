import os

# 앱 import 전에 설정: MySQL 대신 메모리 sqlite
os.environ.setdefault("SQLALCHEMY_URL", "sqlite://")

from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import models  # noqa: F401
from database.db import Base, get_db
from main import app
from models.assessment_types import AssessmentType
from models.classes import SchoolClass
from models.students import Student
from models.subjects import Subject


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def db_session(engine):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# ==========================================================
# 기본 데이터 fixture
# ==========================================================

@pytest.fixture()
def school_class(db_session):
    record = SchoolClass(name="Grade 10A", grade=10, section="A", academic_year="2024", is_active=True)
    db_session.add(record)
    db_session.commit()
    return record


@pytest.fixture()
def other_class(db_session):
    record = SchoolClass(name="Grade 11A", grade=11, section="A", academic_year="2025", is_active=True)
    db_session.add(record)
    db_session.commit()
    return record


@pytest.fixture()
def make_student(db_session, school_class):
    counter = {"n": 0}

    def _make(first_name="Chanda", last_name="Mwale", **overrides):
        counter["n"] += 1
        data = dict(
            first_name=first_name,
            last_name=last_name,
            ecz_number=f"ECZ{counter['n']:05d}",
            gender="Female",
            class_id=school_class.id,
            class_name=school_class.name,
            enrollment_date=date(2024, 1, 15),
            guardian_name="Mary Mwale",
            guardian_phone="0977123456",
            is_active=True,
        )
        data.update(overrides)
        student = Student(**data)
        db_session.add(student)
        db_session.commit()
        return student

    return _make


@pytest.fixture()
def subjects(db_session):
    maths = Subject(name="Mathematics", code="MATH", is_core=True, is_active=True)
    english = Subject(name="English", code="ENG", is_core=True, is_active=True)
    db_session.add_all([maths, english])
    db_session.commit()
    return {"maths": maths, "english": english}


@pytest.fixture()
def assessment_types(db_session):
    ca = AssessmentType(name="Continuous Assessment", code="CA", weightage=30, max_marks=30, order=1, is_active=True)
    mid = AssessmentType(name="Midterm", code="MID", weightage=20, max_marks=20, order=2, is_active=True)
    exam = AssessmentType(name="End of Term", code="EOT", weightage=50, max_marks=50, order=3, is_active=True)
    db_session.add_all([ca, mid, exam])
    db_session.commit()
    return {"ca": ca, "mid": mid, "exam": exam}
