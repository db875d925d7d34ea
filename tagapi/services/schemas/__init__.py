from tagapi.services.schemas.tags import (
    TagDTO,
    TagReplace,
)
from tagapi.services.schemas.page import (
    PageRead,
)

__all__ = [
    "TagDTO",
    "TagReplace",
    "PageRead",
]
