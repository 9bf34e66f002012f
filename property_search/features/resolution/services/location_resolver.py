"""クエリ文字列を参照地点の座標に解決するサービス"""

from typing import Optional

from ....shared.logging.config import get_logger
from ....shared.utils.text import normalize_query
from ...catalog.domain.models import Catalog, ReferenceLocation
from ..domain.models import MatchType, ResolvedTarget
from ..providers.fuzzy_matcher import FuzzyMatcher

logger = get_logger(__name__)


class LocationResolver:
    """
    地点解決サービス

    1. クエリを正規化（前後の空白除去・小文字化）
    2. 参照地点キーと完全一致すればその座標
    3. 一致しなければFuzzyMatcherで近似一致を探す
    4. どちらもなければ未解決（例外ではなく通常の戻り値）
    """

    def __init__(self, catalog: Catalog, matcher: Optional[FuzzyMatcher] = None) -> None:
        """
        Args:
            catalog: 物件カタログ（参照地点を使用）
            matcher: あいまい一致（Noneの場合は既定の閾値で新規作成）
        """
        self.catalog = catalog
        self.matcher = matcher or FuzzyMatcher()

    def resolve(self, query: str) -> ResolvedTarget:
        """
        クエリを解決

        Args:
            query: 生のクエリ文字列

        Returns:
            ResolvedTarget: 解決結果
        """
        normalized = normalize_query(query)

        location = self.catalog.get_location(normalized)
        if location is not None:
            return self._to_target(location, MatchType.EXACT)

        matched_key = self.matcher.best_match(normalized, self.catalog.location_keys)
        if matched_key is not None:
            logger.info(f"Fuzzy matched '{normalized}' to '{matched_key}'")
            return self._to_target(
                self.catalog.reference_locations[matched_key], MatchType.FUZZY
            )

        logger.debug(f"Location not recognized: '{normalized}'")
        return ResolvedTarget(cache_key=normalized, match_type=MatchType.UNRESOLVED)

    def _to_target(self, location: ReferenceLocation, match_type: MatchType) -> ResolvedTarget:
        """参照地点から解決結果を生成"""
        latitude, longitude = location.to_tuple()
        return ResolvedTarget(
            cache_key=location.key,
            match_type=match_type,
            latitude=latitude,
            longitude=longitude,
            matched_key=location.key,
        )
