"""カスタム例外定義"""


class PropertySearchError(Exception):
    """物件検索サービスの基底例外"""

    pass


class ConfigurationError(PropertySearchError):
    """設定エラー"""

    pass


class CatalogError(ConfigurationError):
    """物件カタログの読み込み・検証エラー"""

    pass


class ValidationError(PropertySearchError):
    """バリデーションエラー"""

    pass
