"""編集距離による参照地点のあいまい一致"""

from collections.abc import Iterable
from typing import Optional

from rapidfuzz.distance import Levenshtein

from ....shared.logging.config import get_logger

logger = get_logger(__name__)

# この距離未満（0または1文字違い）のみ一致とみなす
DEFAULT_MAX_DISTANCE = 2


class FuzzyMatcher:
    """
    レーベンシュタイン距離で最も近い候補を探す

    挿入・削除・置換をそれぞれコスト1として数える（隣接文字の入れ替えは2）
    """

    def __init__(self, max_distance: int = DEFAULT_MAX_DISTANCE) -> None:
        """
        Args:
            max_distance: 一致とみなす編集距離の上限（この値は含まない）
        """
        self.max_distance = max_distance

    def best_match(self, query: str, candidates: Iterable[str]) -> Optional[str]:
        """
        クエリに最も近い候補を取得

        候補は辞書順に走査し、より小さい距離が見つかった場合のみ更新するため、
        同距離の候補が複数ある場合は辞書順で最初のものが返る

        Args:
            query: 検索クエリ（小文字に変換して比較）
            candidates: 候補キーの集合

        Returns:
            Optional[str]: 最も近い候補（上限以上しか離れていない場合はNone）
        """
        query = query.lower()

        best: Optional[str] = None
        min_distance = self.max_distance

        for candidate in sorted(candidates):
            distance = Levenshtein.distance(query, candidate)
            if distance < min_distance:
                min_distance = distance
                best = candidate

        if best is not None:
            logger.debug(f"Best fuzzy candidate for '{query}': '{best}' (distance={min_distance})")

        return best
