from .product_service import ProductService, get_product_service

__all__ = ["ProductService", "get_product_service"]
