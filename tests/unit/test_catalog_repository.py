"""物件カタログ読み込みのテスト"""

from pathlib import Path

import pytest

from property_search.features.catalog.domain.models import Catalog
from property_search.features.catalog.repositories.catalog_repository import (
    load_catalog,
    parse_catalog,
)
from property_search.shared.exceptions.errors import CatalogError, ConfigurationError


class TestBundledCatalog:
    def test_counts(self, catalog: Catalog) -> None:
        """同梱カタログは23物件・5地点"""
        assert len(catalog.properties) == 23
        assert len(catalog.reference_locations) == 5
        assert catalog.summary() == {"properties": 23, "reference_locations": 5}

    def test_keeps_file_order(self, catalog: Catalog) -> None:
        """物件はファイルの記載順"""
        assert catalog.properties[0].name == "Moustache Udaipur Luxuria"
        assert catalog.properties[-1].name == "Moustache Shoja"

    def test_reference_keys(self, catalog: Catalog) -> None:
        """参照地点キー"""
        assert catalog.location_keys == {"udaipur", "jaipur", "jaisalmer", "delih", "udiapur"}

    def test_reference_coordinates(self, catalog: Catalog) -> None:
        """参照地点の座標"""
        location = catalog.get_location("udaipur")
        assert location is not None
        assert location.to_tuple() == (24.5854, 73.7125)
        assert catalog.get_location("mumbai") is None


class TestLoadErrors:
    def test_missing_file(self, tmp_path: Path) -> None:
        """ファイルがなければCatalogError"""
        with pytest.raises(CatalogError, match="not found"):
            load_catalog(tmp_path / "missing.yaml")

    def test_malformed_yaml(self, tmp_path: Path) -> None:
        """YAMLとして解析できなければCatalogError"""
        path = tmp_path / "broken.yaml"
        path.write_text("properties: [unclosed\n", encoding="utf-8")
        with pytest.raises(CatalogError, match="Failed to parse"):
            load_catalog(path)

    def test_catalog_error_is_configuration_error(self) -> None:
        """CatalogErrorは設定エラーの一種"""
        assert issubclass(CatalogError, ConfigurationError)


class TestParseCatalog:
    def test_valid(self) -> None:
        """最小構成のカタログ"""
        catalog = parse_catalog(
            {
                "properties": [{"name": "A", "latitude": "1.5", "longitude": 2}],
                "reference_locations": [{"key": "  Udaipur ", "latitude": 1, "longitude": 2}],
            }
        )
        assert catalog.properties[0].latitude == 1.5
        assert catalog.properties[0].longitude == 2.0
        # キーは小文字に正規化
        assert "udaipur" in catalog.reference_locations

    @pytest.mark.parametrize(
        "data",
        [
            None,
            [],
            {"properties": []},
            {"reference_locations": []},
            {"properties": [{"latitude": 1, "longitude": 2}], "reference_locations": []},
            {"properties": [{"name": "A", "latitude": "north", "longitude": 2}], "reference_locations": []},
            {"properties": [], "reference_locations": [{"key": "x", "latitude": 1}]},
            {"properties": ["not a mapping"], "reference_locations": []},
        ],
    )
    def test_invalid(self, data: object) -> None:
        """必須項目の欠落・不正な座標はCatalogError"""
        with pytest.raises(CatalogError):
            parse_catalog(data)

    def test_duplicate_keys(self) -> None:
        """大文字小文字違いも含め、キーの重複はCatalogError"""
        with pytest.raises(CatalogError, match="Duplicate"):
            parse_catalog(
                {
                    "properties": [],
                    "reference_locations": [
                        {"key": "goa", "latitude": 1, "longitude": 2},
                        {"key": "GOA", "latitude": 3, "longitude": 4},
                    ],
                }
            )
