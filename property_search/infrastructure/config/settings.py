"""アプリケーション設定（Pydantic Settings）"""
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# パッケージ同梱のカタログ
DEFAULT_CATALOG_PATH = (
    Path(__file__).resolve().parents[2] / "features" / "catalog" / "config" / "catalog.yaml"
)


class Settings(BaseSettings):
    """アプリケーション設定"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Project
    project_name: str = Field(
        default="property-search",
        description="プロジェクト名",
    )
    environment: str = Field(
        default="development",
        description="環境 (development, staging, production)",
    )

    # Catalog
    catalog_path: Optional[str] = Field(
        default=None,
        description="物件カタログ（YAML）のパス。未設定の場合は同梱のカタログを使用",
    )

    # Search
    search_radius_km: float = Field(
        default=50.0,
        description="検索半径（km、境界を含む）",
    )
    fuzzy_max_distance: int = Field(
        default=2,
        description="あいまい一致を許可する編集距離の上限（この値未満で一致とみなす）",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="ログレベル (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Server
    host: str = Field(
        default="0.0.0.0",
        description="HTTPサーバーのバインドアドレス",
    )
    port: int = Field(
        default=8080,
        description="HTTPサーバーのポート番号",
    )

    def get_catalog_path(self) -> Path:
        """実際に読み込むカタログのパスを取得"""
        if self.catalog_path:
            return Path(self.catalog_path)
        return DEFAULT_CATALOG_PATH

    @property
    def is_production(self) -> bool:
        """本番環境かどうか"""
        return self.environment.lower() == "production"

    @property
    def is_development(self) -> bool:
        """開発環境かどうか"""
        return self.environment.lower() == "development"
