import argparse
import json

from sqlalchemy.orm import Session

from database.db import SessionLocal
from models.classes import SchoolClass as ClassModel
from services import csv_import

# 예: python -m scripts.import_students data/students.csv --class-id 3 \
#       --mapping '{"First Name": "first_name", "Surname": "last_name", ...}'


def migrate_students(csv_path: str, class_id: int, mapping: dict):
    db: Session = SessionLocal()
    try:
        school_class = db.query(ClassModel).filter(ClassModel.id == class_id).first()
        if school_class is None:
            raise SystemExit(f"❌ class {class_id} not found")

        with open(csv_path, newline="", encoding="utf-8-sig") as csvfile:
            headers, rows = csv_import.parse_csv(csvfile.read())

        csv_import.validate_mapping(headers, mapping)
        mapped = csv_import.map_rows(rows, mapping, school_class.id, school_class.name)
        students, errors = csv_import.build_students(mapped)

        created = csv_import.save_students(db, students, errors)
        db.commit()
    finally:
        db.close()

    for error in errors:
        print(f"⚠️  {error}")
    print(f"✅ 학생 CSV → DB 등록 완료: {created}명 (실패 {len(errors)}건)")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Import students from a CSV file")
    parser.add_argument("csv_path")
    parser.add_argument("--class-id", type=int, required=True)
    parser.add_argument("--mapping", required=True, help="JSON object: CSV column -> student field")
    args = parser.parse_args()
    migrate_students(args.csv_path, args.class_id, json.loads(args.mapping))
