"""物件検索HTTPサーバー（FastAPI）"""
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any, Optional

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse, PlainTextResponse

from .features.search.services.search_service import SearchService
from .infrastructure.config.settings import Settings
from .shared.exceptions.errors import ValidationError
from .shared.logging.config import get_logger, setup_logging
from .shared.utils.text import require_query

logger = get_logger(__name__)

SERVICE_NAME = "物件検索サービス"
SERVICE_VERSION = "1.0.0"


def create_app(
    settings: Optional[Settings] = None,
    search_service: Optional[SearchService] = None,
) -> FastAPI:
    """
    FastAPIアプリケーションを作成

    検索サービス（とそのキャッシュ）はアプリケーションごとに1つ作成し、
    app.stateに保持する

    Args:
        settings: アプリケーション設定（Noneの場合は環境変数から読み込み）
        search_service: 検索サービス（Noneの場合は設定から組み立て）

    Returns:
        FastAPI: アプリケーション
    """
    settings = settings or Settings()

    # ロギングを設定
    setup_logging(level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """起動・シャットダウン時の処理"""
        logger.info("Application starting up")
        logger.info(f"Environment: {settings.environment}")
        logger.info(f"Project: {settings.project_name}")
        yield
        logger.info(f"Application shutting down: {app.state.search_service.get_cache_stats()}")

    app = FastAPI(
        title=SERVICE_NAME,
        description="地名クエリから半径内の物件を距離順に検索するサービス",
        version=SERVICE_VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.search_service = search_service or SearchService.from_settings(settings)

    @app.get("/")
    async def root() -> dict[str, Any]:
        """ルートエンドポイント"""
        service: SearchService = app.state.search_service
        return {
            "service": SERVICE_NAME,
            "version": SERVICE_VERSION,
            "status": "running",
            "environment": settings.environment,
            "catalog": service.resolver.catalog.summary(),
        }

    @app.get("/health")
    async def health() -> dict[str, str]:
        """ヘルスチェックエンドポイント"""
        return {"status": "healthy"}

    @app.get("/cache/stats")
    async def cache_stats() -> dict[str, Any]:
        """キャッシュ統計エンドポイント"""
        return app.state.search_service.get_cache_stats()

    @app.get("/search")
    def search(q: Optional[str] = None) -> Response:
        """
        地名クエリで物件を検索

        同期関数として定義し、スレッドプールで並行に処理される

        Args:
            q: 検索クエリ

        Returns:
            検索レスポンス（JSON）。クエリ未指定の場合は400（プレーンテキスト）
        """
        try:
            query = require_query(q)
        except ValidationError as e:
            logger.warning(f"Rejected search request: {e}")
            return PlainTextResponse(str(e), status_code=400)

        response = app.state.search_service.handle_query(query)
        return JSONResponse(content=response.to_dict())

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """グローバル例外ハンドラー"""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"message": "Internal server error", "detail": str(exc)},
        )

    return app


if __name__ == "__main__":
    import uvicorn

    settings = Settings()

    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
