from fastapi import Request

from services.catalog_repository import CatalogRepository


def get_store(request: Request) -> CatalogRepository:
    return request.app.state.store
