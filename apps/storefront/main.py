"""Storefront API Application Entry Point.

Clean Architecture 기반 스토어프론트 서비스입니다.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from apps.storefront.application.common.messages import MessageCatalog
from apps.storefront.presentation.http.controllers import root_router
from apps.storefront.presentation.http.errors import register_exception_handlers
from apps.storefront.setup.config.settings import Settings, get_settings
from apps.storefront.setup.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기 관리."""
    # Startup
    logger.info("Starting Storefront API")

    # ORM 매퍼 시작
    from apps.storefront.infrastructure.persistence_postgres.mappings import start_mappers

    start_mappers()
    logger.info("ORM mappers initialized")

    yield

    # Shutdown
    logger.info("Shutting down Storefront API")
    from apps.storefront.infrastructure.persistence_postgres.session import dispose_engine

    await dispose_engine()


def build_message_catalog(settings: Settings) -> MessageCatalog:
    """설정된 JSON 파일이 있으면 읽고, 없으면 기본 문구만 쓰는 카탈로그를 만듭니다."""
    if settings.message_catalog_path:
        return MessageCatalog.from_file(
            settings.message_catalog_path, default_locale=settings.default_locale
        )
    return MessageCatalog(default_locale=settings.default_locale)


def create_app(settings: Settings | None = None) -> FastAPI:
    """FastAPI 애플리케이션 팩토리."""
    settings = settings or get_settings()

    # 로깅 설정
    setup_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        description="E-commerce storefront API (Clean Architecture)",
        version=settings.service_version,
        lifespan=lifespan,
    )

    # 메시지 카탈로그 (시작 시 한 번 생성, 이후 읽기 전용)
    catalog = build_message_catalog(settings)
    app.state.messages = catalog

    # CORS 설정
    cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 예외 핸들러 등록
    register_exception_handlers(app, catalog)

    # 라우터 등록
    app.include_router(root_router)

    # 업로드 파일 정적 서빙
    upload_dir = Path(settings.upload_dir)
    upload_dir.mkdir(parents=True, exist_ok=True)
    app.mount(settings.upload_base_url, StaticFiles(directory=upload_dir), name="uploads")

    # Health check (루트)
    @app.get("/health")
    async def root_health():
        return {"status": "healthy", "service": "storefront-api", "version": settings.service_version}

    return app


# 애플리케이션 인스턴스
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "apps.storefront.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
