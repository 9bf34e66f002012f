"""共通フィクスチャ"""

import pytest
from fastapi.testclient import TestClient

from property_search.features.catalog.domain.models import Catalog, Property, ReferenceLocation
from property_search.features.catalog.repositories.catalog_repository import load_catalog
from property_search.features.search.services.search_service import SearchService
from property_search.infrastructure.config.settings import DEFAULT_CATALOG_PATH, Settings
from property_search.server import create_app
from property_search.shared.logging.config import setup_logging


@pytest.fixture(scope="session", autouse=True)
def configure_logging() -> None:
    """テストセッション全体で一度だけロギングを設定"""
    setup_logging(level="INFO")


@pytest.fixture(scope="session")
def catalog() -> Catalog:
    """同梱の物件カタログ"""
    return load_catalog(DEFAULT_CATALOG_PATH)


@pytest.fixture()
def small_catalog() -> Catalog:
    """テスト用の小さなカタログ（1地点は周囲に物件なし）"""
    return Catalog(
        properties=(
            Property("Lake View", 24.58, 73.70),
            Property("City Palace Stay", 24.576, 73.683),
            Property("Far Away Camp", 10.0, 10.0),
        ),
        reference_locations={
            "udaipur": ReferenceLocation("udaipur", 24.5854, 73.7125),
            "nowhere": ReferenceLocation("nowhere", -45.0, -120.0),
        },
    )


@pytest.fixture()
def settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    """.envや実行環境の環境変数を読まない既定の設定"""
    for name in Settings.model_fields:
        monkeypatch.delenv(name.upper(), raising=False)
    return Settings(_env_file=None)


@pytest.fixture()
def service(catalog: Catalog) -> SearchService:
    """同梱カタログを使う検索サービス（テストごとに新しいキャッシュ）"""
    return SearchService.from_catalog(catalog)


@pytest.fixture()
def client(settings: Settings, service: SearchService) -> TestClient:
    """FastAPIテストクライアント"""
    return TestClient(create_app(settings, service))
