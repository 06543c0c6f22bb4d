import logging
import os
from typing import Iterator, List, Optional

from src.core.cache import ScanCache
from src.core.models import Category, IdleConfig, Product
from src.ingestion.assets_loader import load_company_logo, load_idle_config
from src.ingestion.scanner import DEFAULT_MAX_DEPTH, load_company_info, scan_sources_folder

logger = logging.getLogger(__name__)


def iter_products(categories: List[Category]) -> Iterator[Product]:
    """Every product in the tree, depth first, in catalog order."""
    stack = list(reversed(categories))
    while stack:
        category = stack.pop()
        yield from category.products
        stack.extend(reversed(category.subcategories))


class CatalogService:
    """The scanned content tree plus the company/idle assets around it."""

    def __init__(
        self,
        sources_dir: str,
        company_info_dir: str,
        max_depth: int = DEFAULT_MAX_DEPTH,
        cache: Optional[ScanCache] = None,
    ):
        self.sources_dir = sources_dir
        self.company_info_dir = company_info_dir
        self.max_depth = max_depth
        self.cache = cache or ScanCache()

    def categories(self, refresh: bool = False) -> List[Category]:
        if refresh:
            self.cache.invalidate(self.sources_dir)
        cached, hit = self.cache.get(self.sources_dir)
        if hit:
            return cached

        categories = scan_sources_folder(self.sources_dir, max_depth=self.max_depth)
        self.cache.set(self.sources_dir, categories)
        return categories

    def company_info(self) -> Optional[Product]:
        return load_company_info(self.company_info_dir)

    def company_logo(self) -> Optional[str]:
        return load_company_logo(self.company_info_dir)

    def idle_config(self) -> IdleConfig:
        return load_idle_config(self.sources_dir)

    def find_product(self, product_path: Optional[str]) -> Optional[Product]:
        """Look a product up by its folder path (ids are only unique per category)."""
        if not product_path:
            return None
        wanted = os.path.abspath(product_path)
        for product in iter_products(self.categories()):
            if product.path == wanted:
                return product
        company = self.company_info()
        if company and company.path == wanted:
            return company
        return None
