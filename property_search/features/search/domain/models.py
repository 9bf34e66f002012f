"""物件検索機能のドメインモデル"""
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PropertyMatch:
    """検索半径内の物件（距離付き）"""

    name: str  # 物件名
    distance_km: float  # 検索中心からの距離（km）
    latitude: float  # 緯度
    longitude: float  # 経度

    def to_dict(self) -> dict[str, Any]:
        """JSONレスポンス用の辞書に変換"""
        return {
            "name": self.name,
            "distance_km": self.distance_km,
            "latitude": self.latitude,
            "longitude": self.longitude,
        }


@dataclass(frozen=True)
class SearchResponse:
    """
    検索レスポンス（キャッシュにもこの形で保存される）

    propertiesは距離の昇順
    """

    properties: tuple[PropertyMatch, ...] = ()
    message: str = ""

    @property
    def count(self) -> int:
        """物件数"""
        return len(self.properties)

    def to_dict(self) -> dict[str, Any]:
        """JSONレスポンス用の辞書に変換（messageが空の場合は省略）"""
        data: dict[str, Any] = {
            "properties": [match.to_dict() for match in self.properties],
        }
        if self.message:
            data["message"] = self.message
        return data
