from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

from beerstock.core.config import settings

# DB 접속 URL
DB_URL = settings.database_url


def _engine_options(url: str) -> dict:
    if not url.startswith("sqlite"):
        return {"pool_pre_ping": True}

    options = {"connect_args": {"check_same_thread": False}}
    # 메모리 DB는 모든 세션이 같은 연결을 공유해야 함
    if make_url(url).database in (None, "", ":memory:"):
        options["poolclass"] = StaticPool
    return options


# SQLAlchemy 엔진
engine = create_engine(DB_URL, **_engine_options(DB_URL))

# DB 세션 팩토리
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)

# ORM 베이스 클래스
Base = declarative_base()


# DB 세션 의존성 (요청마다 생성, 종료 시 반납)
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
