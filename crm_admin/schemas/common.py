from pydantic import BaseModel, ValidationInfo
from datetime import datetime
from typing import Generic, List, Optional, TypeVar, Union

T = TypeVar("T")

def check_not_blank(v: Optional[str], info: ValidationInfo) -> Optional[str]:
    # Required-field check shared by all entity forms
    if v is not None and not v.strip():
        raise ValueError(f"{info.field_name} must not be blank")
    return v

def check_iso_date(v: Optional[str], info: ValidationInfo) -> Optional[str]:
    if v is None:
        return v
    try:
        datetime.strptime(v, '%Y-%m-%d')
    except (TypeError, ValueError):
        raise ValueError(f"{info.field_name} must be in YYYY-MM-DD format")
    return v

class Page(BaseModel, Generic[T]):
    items: List[T]
    total: int
    page: int
    page_size: int
    total_pages: int
    pages: List[Union[int, str]]
