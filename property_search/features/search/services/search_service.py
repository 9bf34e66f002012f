"""物件検索サービス（クエリ受付からキャッシュ保存まで）"""

import time
from typing import Optional

from ....infrastructure.config.settings import Settings
from ....shared.logging.config import get_logger
from ....shared.utils.text import normalize_query, truncate_text
from ...catalog.domain.models import Catalog
from ...catalog.repositories.catalog_repository import load_catalog
from ...resolution.providers.fuzzy_matcher import FuzzyMatcher
from ...resolution.services.location_resolver import LocationResolver
from ..domain.models import SearchResponse
from ..providers.response_cache import ResponseCache
from .property_search_engine import PropertySearchEngine

logger = get_logger(__name__)

MESSAGE_NOT_RECOGNIZED = "Location not recognized"


class SearchService:
    """
    物件検索サービス

    キャッシュの確認には正規化済みのクエリを、保存には解決後の参照地点キーを使う。
    そのため、綴り違いのクエリは毎回解決し直されるが、その結果は正しい綴りの
    クエリからキャッシュヒットする。
    """

    def __init__(
        self,
        resolver: LocationResolver,
        engine: PropertySearchEngine,
        cache: Optional[ResponseCache] = None,
    ) -> None:
        """
        Args:
            resolver: 地点解決サービス
            engine: 物件検索エンジン
            cache: レスポンスキャッシュ（Noneの場合は新規作成）
        """
        self.resolver = resolver
        self.engine = engine
        self.cache = cache if cache is not None else ResponseCache()

    @classmethod
    def from_catalog(
        cls,
        catalog: Catalog,
        radius_km: float = 50.0,
        fuzzy_max_distance: int = 2,
    ) -> "SearchService":
        """カタログから各コンポーネントを組み立てる"""
        return cls(
            resolver=LocationResolver(catalog, FuzzyMatcher(max_distance=fuzzy_max_distance)),
            engine=PropertySearchEngine(catalog.properties, radius_km=radius_km),
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "SearchService":
        """設定からカタログを読み込み、サービスを組み立てる"""
        catalog = load_catalog(settings.get_catalog_path())
        return cls.from_catalog(
            catalog,
            radius_km=settings.search_radius_km,
            fuzzy_max_distance=settings.fuzzy_max_distance,
        )

    def handle_query(self, raw_query: str) -> SearchResponse:
        """
        クエリを処理して検索レスポンスを返す

        Args:
            raw_query: 生のクエリ文字列

        Returns:
            SearchResponse: 検索レスポンス
        """
        start_time = time.perf_counter()
        log_query = truncate_text(raw_query.strip())

        # キャッシュヒットチェック（正規化済みクエリで確認）
        cached = self.cache.get(normalize_query(raw_query))
        if cached is not None:
            logger.info(f"Cache hit for: {log_query}")
            return cached

        target = self.resolver.resolve(raw_query)

        if not target.is_resolved:
            response = SearchResponse(properties=(), message=MESSAGE_NOT_RECOGNIZED)
        else:
            matches = self.engine.search_target(target)
            response = SearchResponse(properties=matches, message=self._build_message(len(matches)))

        # 結果をキャッシュ（解決できた場合は参照地点キーで保存）
        self.cache.put(target.cache_key, response)

        elapsed = time.perf_counter() - start_time
        logger.info(f"Search completed in {elapsed * 1000:.3f}ms: '{log_query}' -> {response.count} properties")

        return response

    def get_cache_stats(self) -> dict[str, float]:
        """キャッシュ統計を取得"""
        return self.cache.get_cache_stats()

    def clear_cache(self) -> None:
        """キャッシュをクリア"""
        self.cache.clear_cache()

    def _build_message(self, count: int) -> str:
        """件数に応じたメッセージを生成"""
        radius = f"{self.engine.radius_km:g}km"
        if count == 0:
            return f"No properties found within {radius}"
        return f"Found {count} properties within {radius}"
