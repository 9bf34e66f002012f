"""検索レスポンスのキャッシュ"""

import threading
from typing import Optional

from ....shared.logging.config import get_logger
from ..domain.models import SearchResponse

logger = get_logger(__name__)


class ResponseCache:
    """
    検索レスポンスのメモリ内キャッシュ

    プロセスの生存期間中はエントリを保持する（上限・有効期限なし）。
    未解決や該当なしのレスポンスも保存し、同じ入力に対する
    あいまい一致の再計算を避ける。

    読み取りはロックを取らない（dictの1回の参照はアトミックで、
    値は不変オブジェクト）。書き込みはロックで直列化し、
    エントリは1回の代入で見えるようになる。
    """

    def __init__(self) -> None:
        self._entries: dict[str, SearchResponse] = {}
        self._lock = threading.Lock()
        self.hit_count = 0
        self.miss_count = 0

        logger.info("ResponseCache initialized")

    def get(self, key: str) -> Optional[SearchResponse]:
        """
        キャッシュからレスポンスを取得

        Args:
            key: キャッシュキー

        Returns:
            Optional[SearchResponse]: キャッシュ済みのレスポンス（ない場合はNone）
        """
        response = self._entries.get(key)

        with self._lock:
            if response is None:
                self.miss_count += 1
            else:
                self.hit_count += 1

        if response is None:
            logger.debug(f"Cache miss for: {key}")
        else:
            logger.debug(f"Cache hit for: {key}")

        return response

    def put(self, key: str, response: SearchResponse) -> None:
        """
        レスポンスをキャッシュに保存（同じキーは上書き）

        Args:
            key: キャッシュキー
            response: 検索レスポンス
        """
        with self._lock:
            self._entries[key] = response

        logger.debug(f"Cached response for: {key}")

    def clear_cache(self) -> None:
        """キャッシュをクリア"""
        with self._lock:
            cache_size = len(self._entries)
            self._entries = {}
            self.hit_count = 0
            self.miss_count = 0
        logger.info(f"Cache cleared: {cache_size} entries removed")

    def get_cache_stats(self) -> dict[str, float]:
        """
        キャッシュ統計を取得

        Returns:
            dict[str, float]: キャッシュ統計（サイズ、ヒット数、ミス数、ヒット率）
        """
        with self._lock:
            hit_count = self.hit_count
            miss_count = self.miss_count
            cache_size = len(self._entries)

        total_requests = hit_count + miss_count
        hit_rate = (hit_count / total_requests * 100) if total_requests > 0 else 0.0

        return {
            "cache_size": cache_size,
            "hit_count": hit_count,
            "miss_count": miss_count,
            "total_requests": total_requests,
            "hit_rate_percent": round(hit_rate, 2),
        }

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
