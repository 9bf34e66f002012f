"""検索中心の座標から半径内の物件を探すエンジン"""

from ....shared.logging.config import get_logger
from ....shared.utils.geo import distance_km
from ...catalog.domain.models import Property
from ...resolution.domain.models import ResolvedTarget
from ..domain.models import PropertyMatch

logger = get_logger(__name__)

DEFAULT_RADIUS_KM = 50.0


class PropertySearchEngine:
    """
    物件検索エンジン

    カタログ全件を線形走査し、半径内（境界を含む）の物件を距離の昇順で返す
    """

    def __init__(self, properties: tuple[Property, ...], radius_km: float = DEFAULT_RADIUS_KM) -> None:
        """
        Args:
            properties: 物件カタログ（記載順）
            radius_km: 検索半径（km）
        """
        self.properties = properties
        self.radius_km = radius_km

        logger.info(
            f"PropertySearchEngine initialized: {len(properties)} properties, radius={radius_km}km"
        )

    def search(self, latitude: float, longitude: float) -> tuple[PropertyMatch, ...]:
        """
        指定座標から半径内の物件を検索

        Args:
            latitude: 検索中心の緯度
            longitude: 検索中心の経度

        Returns:
            tuple[PropertyMatch, ...]: 距離の昇順に並んだ物件（該当なしの場合は空）
        """
        matches = []
        for prop in self.properties:
            distance = distance_km(latitude, longitude, prop.latitude, prop.longitude)
            if distance <= self.radius_km:
                matches.append(
                    PropertyMatch(
                        name=prop.name,
                        distance_km=distance,
                        latitude=prop.latitude,
                        longitude=prop.longitude,
                    )
                )

        # sortedは安定ソートなので、同距離の物件はカタログの記載順になる
        return tuple(sorted(matches, key=lambda match: match.distance_km))

    def search_target(self, target: ResolvedTarget) -> tuple[PropertyMatch, ...]:
        """
        解決済みの地点から検索

        Raises:
            ValueError: 未解決の地点が渡された場合
        """
        if not target.is_resolved:
            raise ValueError(f"Cannot search around an unresolved target: {target!r}")
        return self.search(target.latitude, target.longitude)
