"""
Product CRUD endpoints. Every route requires a valid bearer token.
"""
from fastapi import APIRouter, Depends, Path, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session
from typing import List

from ..db import get_db
from ..guard import require_identity
from ..products import ProductRepository
from ..schemas import MAX_DB_INT, ProductIn, ProductOut

router = APIRouter(
    prefix="/products",
    tags=["products"],
    dependencies=[Depends(require_identity)],
)

ProductId = Path(..., ge=1, le=MAX_DB_INT, description="Product id")


def get_product_repository(db: Session = Depends(get_db)) -> ProductRepository:
    return ProductRepository(db)


@router.get("", response_model=List[ProductOut])
def list_products(repo: ProductRepository = Depends(get_product_repository)):
    return repo.list()


@router.get("/{product_id}", response_model=ProductOut)
def get_product(product_id: int = ProductId, repo: ProductRepository = Depends(get_product_repository)):
    return repo.get(product_id)


@router.post("", response_model=ProductOut, status_code=status.HTTP_201_CREATED)
def create_product(payload: ProductIn, repo: ProductRepository = Depends(get_product_repository)):
    return repo.create(payload)


@router.put("/{product_id}", response_class=PlainTextResponse)
def update_product(
    payload: ProductIn,
    product_id: int = ProductId,
    repo: ProductRepository = Depends(get_product_repository),
):
    repo.update(product_id, payload)
    return "Product updated successfully"


@router.delete("/{product_id}", response_class=PlainTextResponse)
def delete_product(product_id: int = ProductId, repo: ProductRepository = Depends(get_product_repository)):
    repo.delete(product_id)
    return "Product deleted successfully"
