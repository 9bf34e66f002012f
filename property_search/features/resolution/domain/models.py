"""地点解決機能のドメインモデル"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class MatchType(str, Enum):
    """参照地点との一致種別"""

    EXACT = "exact"  # 完全一致
    FUZZY = "fuzzy"  # 編集距離による近似一致
    UNRESOLVED = "unresolved"  # 一致なし


@dataclass(frozen=True)
class ResolvedTarget:
    """
    クエリの解決結果

    解決できなかった場合は緯度・経度がNoneとなり、
    cache_keyには正規化済みのクエリがそのまま入る
    """

    cache_key: str  # レスポンスを保存するキャッシュキー
    match_type: MatchType
    latitude: Optional[float] = None  # 緯度
    longitude: Optional[float] = None  # 経度
    matched_key: Optional[str] = None  # 一致した参照地点キー

    @property
    def is_resolved(self) -> bool:
        """参照地点に解決できたかどうか"""
        return self.match_type != MatchType.UNRESOLVED

    def __repr__(self) -> str:
        if not self.is_resolved:
            return f"ResolvedTarget(unresolved, key={self.cache_key!r})"
        return (
            f"ResolvedTarget({self.match_type.value}, key={self.cache_key!r}, "
            f"lat={self.latitude}, lng={self.longitude})"
        )
