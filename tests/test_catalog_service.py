"""
Unit tests for CatalogService
"""

import os

import pytest

from conftest import write_file
from src.core.cache import ScanCache
from src.services.catalog_service import CatalogService, iter_products


@pytest.fixture
def app_dir(tmp_path):
    write_file(str(tmp_path / "Sources" / "Tools" / "Hammer" / "Photos" / "h.jpg"))
    write_file(str(tmp_path / "Sources" / "Tools" / "Power" / "Drill" / "d.jpg"))
    write_file(str(tmp_path / "CompanyInfo" / "Photos" / "hq.jpg"))
    write_file(str(tmp_path / "CompanyInfo" / "logo.png"), b"LOGO")
    return tmp_path


@pytest.fixture
def service(app_dir):
    return CatalogService(str(app_dir / "Sources"), str(app_dir / "CompanyInfo"), cache=ScanCache())


def test_iter_products_depth_first(catalog_tree):
    products = list(iter_products([catalog_tree["tools"], catalog_tree["garden"]]))
    assert [p.id for p in products] == ["Hammer", "Drill", "Rake"]


def test_categories_are_cached_until_refresh(app_dir, service):
    """Test that a new folder only shows up after refresh"""
    first = service.categories()
    assert [c.id for c in first] == ["Tools"]

    write_file(str(app_dir / "Sources" / "Garden" / "Rake" / "r.jpg"))
    assert service.categories() is first

    assert {c.id for c in service.categories(refresh=True)} == {"Tools", "Garden"}


def test_find_product_by_path(app_dir, service):
    drill_path = str(app_dir / "Sources" / "Tools" / "Power" / "Drill")
    assert service.find_product(drill_path).id == "Drill"
    assert service.find_product(drill_path + os.sep).id == "Drill"
    assert service.find_product(str(app_dir / "CompanyInfo")).id == "CompanyInfo"
    assert service.find_product(str(app_dir / "nowhere")) is None
    assert service.find_product(None) is None


def test_company_assets(service):
    assert [m.filename for m in service.company_info().media] == ["hq.jpg"]
    assert service.company_logo().startswith("data:image/png;base64,")
    assert service.idle_config().timeout_seconds == 60
