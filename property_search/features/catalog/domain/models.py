"""物件カタログのドメインモデル"""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class Property:
    """物件（起動時に読み込まれ、以後変更されない）"""

    name: str  # 物件名
    latitude: float  # 緯度
    longitude: float  # 経度

    def __repr__(self) -> str:
        return f"Property({self.name!r}, lat={self.latitude}, lng={self.longitude})"


@dataclass(frozen=True)
class ReferenceLocation:
    """検索の中心となる既知の地点"""

    key: str  # 小文字の正規名
    latitude: float  # 緯度
    longitude: float  # 経度

    def to_tuple(self) -> tuple[float, float]:
        """(緯度, 経度)のタプルとして返す"""
        return (self.latitude, self.longitude)


@dataclass(frozen=True)
class Catalog:
    """
    物件カタログ

    物件はYAMLの記載順を保持する（距離が同じ場合の並び順に使われる）
    """

    properties: tuple[Property, ...]
    reference_locations: dict[str, ReferenceLocation] = field(default_factory=dict)

    @property
    def location_keys(self) -> frozenset[str]:
        """参照地点キーの集合"""
        return frozenset(self.reference_locations)

    def get_location(self, key: str) -> Optional[ReferenceLocation]:
        """キーで参照地点を取得（存在しない場合はNone）"""
        return self.reference_locations.get(key)

    def summary(self) -> dict[str, Any]:
        """ログ・ヘルスチェック用の件数サマリー"""
        return {
            "properties": len(self.properties),
            "reference_locations": len(self.reference_locations),
        }
