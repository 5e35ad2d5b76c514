from .product import (
	Product,
	ProductCreate,
	ProductUpdate,
	ProductListResponse,
	ProductDetailResponse,
	ProductResponse,
)

__all__ = [
	"Product",
	"ProductCreate",
	"ProductUpdate",
	"ProductListResponse",
	"ProductDetailResponse",
	"ProductResponse",
]
