# beerstock/main.py
import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from beerstock.core.config import settings
from beerstock.core.database import Base, engine
from beerstock.core.exceptions import BeerStockError
from beerstock.core.logging import setup_logging

# 라우터들
from beerstock.routers.beer_router import router as beer_router
from beerstock.routers.log_router import router as log_router

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="Beer Stock API", debug=settings.DEBUG)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --------------------------------
# 라우터 등록
# --------------------------------
app.include_router(beer_router)
app.include_router(log_router)


# --------------------------------
# 예외 처리
# --------------------------------
@app.exception_handler(BeerStockError)
async def beer_stock_error_handler(request: Request, exc: BeerStockError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


# 필수 필드 누락 등 요청 검증 실패는 400으로 응답
@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning("요청 검증 실패: %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid request", "errors": jsonable_encoder(exc.errors())},
    )


# --------------------------------
# 서버 이벤트
# --------------------------------
@app.on_event("startup")
def on_startup():
    Base.metadata.create_all(bind=engine)
    logger.info("DB 테이블 자동 생성 완료")
    logger.info("서버 시작 중...")


@app.on_event("shutdown")
def on_shutdown():
    engine.dispose()
    logger.info("서버 종료, DB 연결 정리 완료")
