from fastapi import APIRouter, HTTPException, Query, Body
from typing import Optional, Type
from pydantic import BaseModel
import logging

from crm_admin.core.config import settings
from crm_admin.core.crud import InMemoryEntityService
from crm_admin.core.listing import filter_records, paginate, page_window
from crm_admin.core.services import SEARCH_FIELDS
from crm_admin.schemas.common import Page

logger = logging.getLogger(__name__)

def build_crud_router(
    path: str,
    service: InMemoryEntityService,
    model: Type[BaseModel],
    create_model: Type[BaseModel],
    update_model: Type[BaseModel],
    status_field: Optional[str] = None,
    router: Optional[APIRouter] = None,
) -> APIRouter:
    """
    List/get/create/update/delete routes for one collection.
    Missing records become 404 here; the service itself reports them as None/False.
    Pass a router with fixed sub-paths already registered so they win over /{record_id}.
    """
    router = router or APIRouter(prefix=f"/{path}", tags=[path])
    search_fields = SEARCH_FIELDS[service.collection]
    label = service.collection

    @router.get("", response_model=Page[model])
    async def list_records(
        search: Optional[str] = Query(None),
        status: Optional[str] = Query(None),
        page: int = Query(1, ge=1),
        page_size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    ):
        records = await service.get_all()
        matched = filter_records(
            records,
            search,
            search_fields,
            status=status if status_field else None,
            status_field=status_field or "status",
        )
        items, current, pages = paginate(matched, page, page_size)
        return Page[model](
            items=items,
            total=len(matched),
            page=current,
            page_size=page_size,
            total_pages=pages,
            pages=page_window(current, pages),
        )

    @router.get("/{record_id}", response_model=model)
    async def get_record(record_id: str):
        record = await service.get(record_id)
        if record is None:
            raise HTTPException(status_code=404, detail=f"{label} record '{record_id}' not found")
        return record

    @router.post("", response_model=model, status_code=201)
    async def create_record(data: create_model = Body(...)):
        return await service.create(data)

    @router.patch("/{record_id}", response_model=model)
    async def update_record(record_id: str, changes: update_model = Body(...)):
        record = await service.update(record_id, changes)
        if record is None:
            logger.warning(f"Update of missing {label} record {record_id}")
            raise HTTPException(status_code=404, detail=f"{label} record '{record_id}' not found")
        return record

    @router.delete("/{record_id}")
    async def delete_record(record_id: str):
        if not await service.delete(record_id):
            logger.warning(f"Delete of missing {label} record {record_id}")
            raise HTTPException(status_code=404, detail=f"{label} record '{record_id}' not found")
        return {"status": "success", "deleted": record_id}

    return router
