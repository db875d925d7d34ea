# tagapi/services/api/routers/tags.py
from __future__ import annotations

from typing import Any, List

from fastapi import APIRouter, Body, Depends, Path, Query

from tagapi.common.logging import get_logger
from tagapi.common.settings import get_settings
from tagapi.domain.entities.tag import TAG_ID_MAX, TAG_ID_MIN
from tagapi.domain.errors import InvalidArgumentError
from tagapi.services.api.deps import get_tag_service
from tagapi.services.schemas import PageRead, TagDTO, TagReplace
from tagapi.services.tags.service import TagService
from tagapi.services.validation import validate_many, validate_model

cfg = get_settings()
log = get_logger(__name__, cfg.log_level)
router = APIRouter(prefix=cfg.api.tags_base_path, tags=["tags"])

TAG_PAGE_SIZE = 50
# keeps OFFSET + LIMIT inside BIGINT
MAX_PAGE_NUMBER = TAG_ID_MAX // TAG_PAGE_SIZE - 1

INVALID_CREATE_MESSAGE = "Attempt to create Tags with an invalid list."
INVALID_UPDATE_MESSAGE = "Attempt to update a Tag with invalid data."


def _reject(message: str, errors) -> InvalidArgumentError:
    log.warning(message)
    return InvalidArgumentError(message, [e.as_dict() for e in errors])


@router.post("/tags", response_model=List[TagDTO])
def save_all_tags(
    payload: List[Any] = Body(...),
    svc: TagService = Depends(get_tag_service),
) -> List[TagDTO]:
    """
    Create a batch of Tags and return them with their ids, in submission order.
    One invalid element rejects the whole batch before anything is saved.
    """
    result = validate_many(TagDTO, payload)
    if not result.ok:
        raise _reject(INVALID_CREATE_MESSAGE, result.errors)
    return svc.save_tags(result.value)


@router.get("", response_model=PageRead[TagDTO])
def retrieve_all_tags(
    page_number: int = Query(..., alias="pageNumber", le=MAX_PAGE_NUMBER, description="Zero-based page index"),
    svc: TagService = Depends(get_tag_service),
) -> PageRead[TagDTO]:
    page = svc.retrieve_all_tags(page_number, TAG_PAGE_SIZE)
    return PageRead[TagDTO].model_validate(page)


@router.get("/tags/{tag_id}", response_model=TagDTO)
def retrieve_by_id(
    tag_id: int = Path(..., ge=TAG_ID_MIN, le=TAG_ID_MAX),
    svc: TagService = Depends(get_tag_service),
) -> TagDTO:
    return svc.retrieve_tag_by_id(tag_id)


@router.get("/byName", response_model=List[TagDTO])
def find_by_name(
    name: str = Query(..., description="Case-insensitive name fragment"),
    svc: TagService = Depends(get_tag_service),
) -> List[TagDTO]:
    return [TagDTO.model_validate(t) for t in svc.find_tag_by_name(name)]


@router.get("/retrieveByName", response_model=TagDTO)
def retrieve_by_name(
    name: str = Query(...),
    svc: TagService = Depends(get_tag_service),
) -> TagDTO:
    return TagDTO.model_validate(svc.retrieve_tag_by_name(name))


@router.put("", response_model=TagDTO)
def update_tag(
    payload: Any = Body(...),
    svc: TagService = Depends(get_tag_service),
) -> TagDTO:
    """Full replace of the Tag named by `payload.id`."""
    result = validate_model(TagReplace, payload)
    if not result.ok:
        raise _reject(INVALID_UPDATE_MESSAGE, result.errors)
    return svc.update_tag(result.value)


@router.delete("", response_model=bool)
def delete_tag(
    tag_id: int = Query(..., alias="id", ge=TAG_ID_MIN, le=TAG_ID_MAX),
    svc: TagService = Depends(get_tag_service),
) -> bool:
    return svc.delete_tag(tag_id)
