# routers/brands.py

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from db.deps import get_store
from models.schemas import BrandCreate, BrandResponse
from services.catalog_repository import CatalogRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/brands", tags=["brands"])


@router.get("", response_model=list[BrandResponse])
def list_brands(store: CatalogRepository = Depends(get_store)):
    return store.list_brands()


@router.get("/{brand_id}", response_model=BrandResponse)
def get_brand(brand_id: int, store: CatalogRepository = Depends(get_store)):
    brand = store.get_brand(brand_id)
    if brand is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Brand not found")
    return brand


@router.post("", response_model=BrandResponse, status_code=status.HTTP_201_CREATED)
def create_brand(payload: BrandCreate, store: CatalogRepository = Depends(get_store)):
    if store.find_brand_by_name(payload.name) is not None:
        logger.warning("Rejected duplicate brand name=%s", payload.name)
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Brand already exists")
    return store.create_brand(payload.model_dump())
