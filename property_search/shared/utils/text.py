"""テキスト処理ユーティリティ"""

from typing import Optional

from ..exceptions.errors import ValidationError


def normalize_query(text: str) -> str:
    """
    検索クエリを正規化

    - 前後の空白を除去
    - 小文字に変換

    内部の空白はそのまま残す（参照地点キーとの完全一致判定に使うため）
    """
    return text.strip().lower()


def require_query(text: Optional[str]) -> str:
    """
    検索クエリが指定されていることを確認

    Args:
        text: 生のクエリ文字列

    Returns:
        str: 入力そのまま（正規化は行わない）

    Raises:
        ValidationError: クエリが未指定または空文字の場合
    """
    if not text:
        raise ValidationError("Query parameter 'q' is required")
    return text


def truncate_text(text: str, max_length: int = 100, suffix: str = "...") -> str:
    """
    テキストを指定長で切り詰め（ログ出力用）

    Args:
        text: 対象テキスト
        max_length: 最大文字数
        suffix: 切り詰め時の接尾辞

    Returns:
        切り詰められたテキスト
    """
    if not text or len(text) <= max_length:
        return text

    return text[: max_length - len(suffix)] + suffix
