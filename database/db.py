from sqlalchemy import create_engine               # SQLAlchemy 엔진 생성 도구
from sqlalchemy.orm import declarative_base, sessionmaker

from config.settings import settings               # ✅ 환경변수 설정 파일 불러오기

# ✅ 환경변수에서 DB 연결 URL을 불러와 엔진 생성
engine = create_engine(settings.DATABASE_URL, pool_pre_ping=True)

# ✅ 세션 팩토리
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# ✅ 모델 정의 시 상속할 Base 클래스
Base = declarative_base()


# ==========================================================
# [공통] DB 세션 의존성
# - 라우터마다 get_db를 복제하지 않고 이 함수 하나를 Depends로 주입
# - 테스트에서는 app.dependency_overrides[get_db]로 교체
# ==========================================================
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
