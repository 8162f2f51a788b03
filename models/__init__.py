# ✅ Base.metadata.create_all 전에 모든 모델을 등록하기 위한 import
from models.students import Student
from models.classes import SchoolClass
from models.subjects import Subject
from models.assessment_types import AssessmentType
from models.results import Result
from models.fees import FeeLedger, FeePayment
from models.attendance import Attendance
from models.lessons import LessonPlan

__all__ = [
    "Student",
    "SchoolClass",
    "Subject",
    "AssessmentType",
    "Result",
    "FeeLedger",
    "FeePayment",
    "Attendance",
    "LessonPlan",
]
