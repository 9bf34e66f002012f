"""物件カタログの読み込み"""

from pathlib import Path
from typing import Any

import yaml

from ....shared.exceptions.errors import CatalogError
from ....shared.logging.config import get_logger
from ..domain.models import Catalog, Property, ReferenceLocation

logger = get_logger(__name__)


def load_catalog(path: str | Path) -> Catalog:
    """
    YAMLファイルから物件カタログを読み込む

    Args:
        path: カタログファイルのパス

    Returns:
        Catalog: 物件カタログ

    Raises:
        CatalogError: ファイルが存在しない、または内容が不正な場合
    """
    catalog_path = Path(path)
    if not catalog_path.is_file():
        raise CatalogError(f"Catalog file not found: {catalog_path}")

    try:
        with open(catalog_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise CatalogError(f"Failed to parse catalog {catalog_path}: {e}") from e

    catalog = parse_catalog(data)

    logger.info(
        f"Catalog loaded from {catalog_path}: "
        f"{len(catalog.properties)} properties, "
        f"{len(catalog.reference_locations)} reference locations"
    )

    return catalog


def parse_catalog(data: Any) -> Catalog:
    """
    読み込み済みのデータから物件カタログを生成

    Args:
        data: yaml.safe_loadの結果

    Returns:
        Catalog: 物件カタログ

    Raises:
        CatalogError: 必須項目の欠落や座標が数値でない場合
    """
    if not isinstance(data, dict):
        raise CatalogError("Catalog must be a mapping with 'properties' and 'reference_locations'")

    properties = tuple(
        Property(
            name=str(_require(entry, "name", "property")),
            latitude=_coordinate(entry, "latitude", "property"),
            longitude=_coordinate(entry, "longitude", "property"),
        )
        for entry in _require_list(data, "properties")
    )

    reference_locations: dict[str, ReferenceLocation] = {}
    for entry in _require_list(data, "reference_locations"):
        # キーは小文字で保持する（クエリ側も小文字に正規化される）
        key = str(_require(entry, "key", "reference location")).strip().lower()
        if key in reference_locations:
            raise CatalogError(f"Duplicate reference location key: {key}")
        reference_locations[key] = ReferenceLocation(
            key=key,
            latitude=_coordinate(entry, "latitude", "reference location"),
            longitude=_coordinate(entry, "longitude", "reference location"),
        )

    return Catalog(properties=properties, reference_locations=reference_locations)


def _require_list(data: dict[str, Any], name: str) -> list[Any]:
    """必須のリスト項目を取得"""
    value = data.get(name)
    if not isinstance(value, list):
        raise CatalogError(f"Catalog section '{name}' must be a list")
    return value


def _require(entry: Any, name: str, kind: str) -> Any:
    """必須項目を取得"""
    if not isinstance(entry, dict) or entry.get(name) in (None, ""):
        raise CatalogError(f"Missing '{name}' in {kind} entry: {entry!r}")
    return entry[name]


def _coordinate(entry: Any, name: str, kind: str) -> float:
    """座標を数値として取得"""
    value = _require(entry, name, kind)
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise CatalogError(f"Invalid {name} in {kind} entry: {entry!r}") from e
