"""
FastAPI 애플리케이션

라우터 등록 및 앱 설정.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from core.constants import Defaults
from core.logging import setup_logging

# 로깅 설정 (콘솔 + 파일)
setup_logging("web")

from core.config.loader import get_settings
from core.ledger.financial_year import compute_financial_year
from core.ledger.store import build_ledger_store
from web.dependencies import set_financial_year, set_ledger_store
from web.routes import health, parties, statements

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """앱 생명주기 관리"""
    settings = get_settings()

    # 시작 시 - 원장/회계연도는 한 번만 계산 (이후 읽기 전용)
    store = build_ledger_store()
    financial_year = compute_financial_year()
    set_ledger_store(store)
    set_financial_year(financial_year)

    logger.info(f"Web: 회계연도 {financial_year.label} ({financial_year.start:%Y-%m-%d} ~ {financial_year.end:%Y-%m-%d})")
    logger.info(f"Web: 명세서 출력 디렉토리 {settings.output_dir}")

    yield

    # 종료 시
    set_ledger_store(None)
    set_financial_year(None)


app = FastAPI(
    title=f"{Defaults.APP_NAME} API",
    description="거래처 원장 명세서 PDF 생성 및 메일 발송 API",
    version=Defaults.VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# CORS 설정 (개발용)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# =========================================================================
# API 라우터 등록
# =========================================================================

app.include_router(health.router)
app.include_router(parties.router)
app.include_router(statements.router)


@app.get("/", include_in_schema=False)
async def home():
    """홈페이지 (API 문서로 리다이렉트)"""
    return RedirectResponse(url="/docs")
