# routers/comparisons.py

from fastapi import APIRouter, Depends, HTTPException, Response, status

from db.deps import get_store
from models.records import ComparisonRecord, DeviceRecord, decode_device_ids
from models.schemas import (
    CompareRequest,
    ComparisonCreate,
    ComparisonResponse,
    DeviceResponse,
)
from services.catalog_repository import CatalogRepository, DeviceNotFoundError
from services.comparison_report import summarize_comparison

router = APIRouter(prefix="/api", tags=["comparisons"])


def _require_comparison(store: CatalogRepository, comparison_id: int) -> ComparisonRecord:
    comparison = store.get_comparison(comparison_id)
    if comparison is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Comparison not found")
    return comparison


def _resolve(store: CatalogRepository, device_ids: list[int]) -> list[DeviceRecord]:
    try:
        return store.resolve_devices(device_ids)
    except DeviceNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


# ==================================================
# SAVED COMPARISONS
# ==================================================

@router.get("/comparisons", response_model=list[ComparisonResponse])
def list_comparisons(store: CatalogRepository = Depends(get_store)):
    return store.list_comparisons()


@router.get("/comparisons/{comparison_id}", response_model=ComparisonResponse)
def get_comparison(comparison_id: int, store: CatalogRepository = Depends(get_store)):
    return _require_comparison(store, comparison_id)


@router.get("/comparisons/{comparison_id}/devices", response_model=list[DeviceResponse])
def comparison_devices(comparison_id: int, store: CatalogRepository = Depends(get_store)):
    comparison = _require_comparison(store, comparison_id)
    return _resolve(store, decode_device_ids(comparison.device_ids))


@router.post("/comparisons", response_model=ComparisonResponse, status_code=status.HTTP_201_CREATED)
def create_comparison(payload: ComparisonCreate, store: CatalogRepository = Depends(get_store)):
    return store.create_comparison(payload.model_dump())


@router.delete("/comparisons/{comparison_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_comparison(comparison_id: int, store: CatalogRepository = Depends(get_store)):
    if not store.delete_comparison(comparison_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Comparison not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ==================================================
# AD-HOC COMPARE
# ==================================================

@router.post("/compare", response_model=list[DeviceResponse])
def compare_devices(payload: CompareRequest, store: CatalogRepository = Depends(get_store)):
    return _resolve(store, payload.device_ids)


@router.post("/compare/summary")
def compare_summary(payload: CompareRequest, store: CatalogRepository = Depends(get_store)):
    return summarize_comparison(_resolve(store, payload.device_ids))
