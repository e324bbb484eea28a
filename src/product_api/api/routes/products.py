"""
Product API routes
"""

import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Path, Query

from product_api.models.product import (
    ProductCreate,
    ProductUpdateRequest,
    ProductResponse,
    ProductNameFilter,
    ProductPriceFilter,
    ProductDuplicateRequest
)
from product_api.services.base_service import ServiceResult
from product_api.services.products_service import ProductsService, get_products_service
from product_api.utils.helpers import clamp_offset, clamp_page_size

router = APIRouter()
logger = logging.getLogger(__name__)

PRODUCT_NOT_FOUND_MESSAGE = "Product not found"
PRODUCT_ID_PATTERN = r"^[0-9]+$"


def product_id_path(product_id: str = Path(..., pattern=PRODUCT_ID_PATTERN)) -> int:
    """Product ID from the URL; only plain ASCII digits are accepted"""
    return int(product_id)


def _raise_for_error(result: ServiceResult):
    if result.success:
        return
    if result.not_found:
        raise HTTPException(status_code=404, detail=PRODUCT_NOT_FOUND_MESSAGE)
    raise HTTPException(status_code=500, detail=result.error)


def _to_products(result: ServiceResult) -> List[ProductResponse]:
    return [ProductResponse(**row) for row in result.data]


@router.get("/products", response_model=List[ProductResponse])
async def list_products(
    count: Optional[str] = Query(None, description="Page size, 1-10 (default 10)"),
    start: Optional[str] = Query(None, description="Number of products to skip"),
    service: ProductsService = Depends(get_products_service)
):
    """List products with a capped page size"""
    result = await service.list_products(clamp_offset(start), clamp_page_size(count))
    _raise_for_error(result)
    return _to_products(result)


@router.post("/product", response_model=ProductResponse, status_code=201)
async def create_product(
    request: ProductCreate,
    service: ProductsService = Depends(get_products_service)
):
    """Create a new product"""
    result = await service.create_product(request.name, request.price)
    _raise_for_error(result)

    return ProductResponse(id=result.data[0]["id"], name=request.name, price=request.price)


@router.post("/product/duplicate", response_model=ProductResponse, status_code=201)
async def duplicate_product(
    request: ProductDuplicateRequest,
    service: ProductsService = Depends(get_products_service)
):
    """Create a new product named new_name with the price of an existing one"""
    origin_result = await service.get_product_by_id(request.origin_id)
    _raise_for_error(origin_result)

    price = origin_result.data[0]["price"]
    result = await service.create_product(request.new_name, price)
    _raise_for_error(result)

    logger.info(f"Duplicated product {request.origin_id} as {result.data[0]['id']}")
    return ProductResponse(id=result.data[0]["id"], name=request.new_name, price=price)


@router.post("/product/filterByName", response_model=List[ProductResponse])
async def filter_products_by_name(
    request: ProductNameFilter,
    service: ProductsService = Depends(get_products_service)
):
    """Products whose name matches exactly"""
    result = await service.list_products_by_name(request.name)
    _raise_for_error(result)
    return _to_products(result)


@router.post("/product/filterByPrice", response_model=List[ProductResponse])
async def filter_products_by_price(
    request: ProductPriceFilter,
    service: ProductsService = Depends(get_products_service)
):
    """Products priced within the inclusive range"""
    result = await service.list_products_by_price_range(request.min_price, request.max_price)
    _raise_for_error(result)
    return _to_products(result)


@router.get("/product/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: int = Depends(product_id_path),
    service: ProductsService = Depends(get_products_service)
):
    """Get product by ID"""
    result = await service.get_product_by_id(product_id)
    _raise_for_error(result)
    return ProductResponse(**result.data[0])


@router.put("/product/{product_id}", response_model=ProductResponse)
async def update_product(
    request: ProductUpdateRequest,
    product_id: int = Depends(product_id_path),
    service: ProductsService = Depends(get_products_service)
):
    """Overwrite a product's name and price"""
    result = await service.update_product(product_id, request.name, request.price)
    _raise_for_error(result)

    return ProductResponse(id=product_id, name=request.name, price=request.price)


@router.delete("/product/{product_id}")
async def delete_product(
    product_id: int = Depends(product_id_path),
    service: ProductsService = Depends(get_products_service)
):
    """Delete a product"""
    result = await service.delete_product(product_id)
    _raise_for_error(result)
    return {"result": "success"}
