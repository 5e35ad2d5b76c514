from typing import Any

from fastapi import APIRouter, Body, Depends, status
from pydantic import ValidationError
from ...core.errors import ProductValidationError
from ...models.product import (
    ProductCreate,
    ProductDetailResponse,
    ProductListResponse,
    ProductResponse,
    ProductUpdate,
)
from ...services.product_service import ProductService, get_product_service
from ..error_handlers import BODY_INVALID, validation_message

router = APIRouter()


@router.get("", response_model=ProductListResponse)
async def get_products(service: ProductService = Depends(get_product_service)):
    """Get all products"""
    products = service.list()
    return ProductListResponse(count=len(products), data=products)


# Registered before /{product_id} so "instock" is not parsed as an id
@router.get("/instock", response_model=ProductListResponse)
async def get_in_stock_products(service: ProductService = Depends(get_product_service)):
    """Get all in-stock products"""
    products = service.filter_by_stock()
    return ProductListResponse(count=len(products), data=products)


@router.get("/{product_id}", response_model=ProductDetailResponse)
async def get_product(product_id: int, service: ProductService = Depends(get_product_service)):
    """Get a specific product by ID"""
    return ProductDetailResponse(data=service.get_by_id(product_id))


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    payload: ProductCreate,
    service: ProductService = Depends(get_product_service),
):
    """Create a new product"""
    product = service.append(payload)
    return ProductResponse(message="Product created successfully", data=product)


@router.put("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: int,
    body: Any = Body(default=None),
    service: ProductService = Depends(get_product_service),
):
    """Update a product"""
    # A missing product answers 404 before any field is checked
    service.get_by_id(product_id)
    if body is not None and not isinstance(body, dict):
        raise ProductValidationError(BODY_INVALID)
    try:
        payload = ProductUpdate.model_validate(body or {})
    except ValidationError as exc:
        raise ProductValidationError(validation_message(exc.errors())) from exc

    product = service.replace_at(product_id, payload)
    return ProductResponse(message="Product updated successfully", data=product)


@router.delete("/{product_id}", response_model=ProductResponse)
async def delete_product(product_id: int, service: ProductService = Depends(get_product_service)):
    """Delete a product"""
    product = service.remove(product_id)
    return ProductResponse(
        message=f"Product with ID {product_id} deleted successfully",
        data=product,
    )
