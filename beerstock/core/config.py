from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # 전체 DB URL (지정 시 아래 DB_* 값보다 우선)
    DATABASE_URL: Optional[str] = None

    # DB 계정
    DB_USER: str = "root"
    DB_PASSWORD: str = ""

    # DB 접속 정보
    DB_HOST: Optional[str] = None
    DB_PORT: int = 3306
    DB_NAME: str = "beerstock"

    # 서버 설정
    SERVER_PORT: int = 8000
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # 환경변수 파일
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        if self.DB_HOST:
            return (
                f"mysql+pymysql://{self.DB_USER}:{self.DB_PASSWORD}"
                f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}?charset=utf8mb4"
            )
        # 로컬 개발용 SQLite 파일
        return "sqlite:///./beerstock.db"


# 전역 설정 인스턴스
settings = Settings()
