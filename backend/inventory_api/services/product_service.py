import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from ..core.config import get_settings
from ..core.errors import ProductNotFoundError, StorageError
from ..models.product import Product, ProductCreate, ProductUpdate

logger = logging.getLogger(__name__)


class ProductService:
    """JSON-file backed product collection.

    Every call reads the whole file and every mutation rewrites it. Records
    are kept as stored, so keys outside the product fields survive a
    rewrite. There is no cache and no locking between requests.
    """

    def __init__(self, data_file: Path):
        self.data_file = Path(data_file)

    def _load_products(self) -> List[Dict[str, Any]]:
        try:
            if not self.data_file.exists():
                self.data_file.parent.mkdir(parents=True, exist_ok=True)
                self.data_file.write_text(json.dumps([], indent=2), encoding="utf-8")
                logger.info("Created empty products file at %s", self.data_file)
                return []

            raw = self.data_file.read_text(encoding="utf-8")
            if not raw.strip():
                return []

            payload = json.loads(raw)
        except (OSError, ValueError) as exc:
            logger.error("Error reading products file: %s", exc)
            raise StorageError("Failed to read products data") from exc

        if not isinstance(payload, list) or not all(isinstance(item, dict) for item in payload):
            logger.error("Error reading products file: expected a JSON array of objects")
            raise StorageError("Failed to read products data")
        return payload

    def _save_products(self, products: List[Dict[str, Any]]) -> None:
        try:
            with self.data_file.open("w", encoding="utf-8") as f:
                json.dump(products, f, indent=2, ensure_ascii=False)
        except (OSError, TypeError, ValueError) as exc:
            logger.error("Error writing products file: %s", exc)
            raise StorageError("Failed to save products data") from exc

    @staticmethod
    def _index_of(products: List[Dict[str, Any]], product_id: int) -> int:
        for index, product in enumerate(products):
            if product.get("id") == product_id:
                return index
        raise ProductNotFoundError(product_id)

    def list(self) -> List[Dict[str, Any]]:
        return self._load_products()

    def filter_by_stock(self) -> List[Dict[str, Any]]:
        return [p for p in self._load_products() if p.get("inStock") is True]

    def get_by_id(self, product_id: int) -> Dict[str, Any]:
        products = self._load_products()
        return products[self._index_of(products, product_id)]

    def append(self, payload: ProductCreate) -> Dict[str, Any]:
        products = self._load_products()
        ids = [p["id"] for p in products if isinstance(p.get("id"), int) and not isinstance(p["id"], bool)]
        new_id = max(ids, default=0) + 1
        product = Product(
            id=new_id,
            name=payload.name,
            price=payload.price,
            in_stock=payload.in_stock,
        ).model_dump(by_alias=True)
        products.append(product)
        self._save_products(products)
        logger.info("Created product %s", new_id)
        return product

    def replace_at(self, product_id: int, payload: ProductUpdate) -> Dict[str, Any]:
        products = self._load_products()
        index = self._index_of(products, product_id)
        products[index].update(payload.changes())
        self._save_products(products)
        logger.info("Updated product %s", product_id)
        return products[index]

    def remove(self, product_id: int) -> Dict[str, Any]:
        products = self._load_products()
        removed = products.pop(self._index_of(products, product_id))
        self._save_products(products)
        logger.info("Deleted product %s", product_id)
        return removed


def get_product_service() -> ProductService:
    """FastAPI dependency: a store bound to the configured products file."""
    return ProductService(get_settings().products_file)
