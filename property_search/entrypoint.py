"""CLIエントリーポイント"""
import argparse
import json
import sys
from typing import Optional

from .features.search.services.search_service import SearchService
from .infrastructure.config.settings import Settings
from .shared.exceptions.errors import ValidationError
from .shared.logging.config import get_logger, setup_logging
from .shared.utils.text import require_query

logger = get_logger(__name__)


def main(argv: Optional[list[str]] = None) -> int:
    """
    メインエントリーポイント

    指定されたクエリを順に検索し、レスポンスを1行ずつJSONで出力する。
    同じ検索サービスを使うため、後のクエリはキャッシュにヒットすることがある

    Returns:
        int: 終了コード（0: 成功, 1: 失敗, 2: クエリ不正）
    """
    parser = argparse.ArgumentParser(
        description="地名から半径内の物件を検索するツール"
    )

    parser.add_argument(
        "queries",
        nargs="+",
        metavar="QUERY",
        help="検索する地名（例: udaipur）",
    )

    parser.add_argument(
        "--catalog",
        type=str,
        help="物件カタログ（YAML）のパス",
    )

    parser.add_argument(
        "--env-file",
        type=str,
        default=".env",
        help="環境変数ファイルのパス（デフォルト: .env）",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="ログレベル",
    )

    args = parser.parse_args(argv)

    try:
        # 設定を読み込み
        settings = Settings(_env_file=args.env_file)

        # 設定を上書き
        if args.log_level:
            settings.log_level = args.log_level
        if args.catalog:
            settings.catalog_path = args.catalog

        # ロガーを設定
        setup_logging(level=settings.log_level)

        service = SearchService.from_settings(settings)

        for raw_query in args.queries:
            query = require_query(raw_query)
            response = service.handle_query(query)
            print(json.dumps(response.to_dict(), ensure_ascii=False))

        logger.info(f"Cache stats: {service.get_cache_stats()}")
        return 0

    except ValidationError as e:
        logger.error(f"Invalid query: {e}")
        return 2
    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 130  # SIGINT
    except Exception as e:
        logger.error(f"Application failed: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
