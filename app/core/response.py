"""Response helpers for list endpoints."""


from fastapi import Response

from app.core.config import settings
from app.core.pagination import PageMetaData


def set_pagination_header(response: Response, meta: PageMetaData) -> None:
    """Write page metadata as a camelCase JSON object into the pagination header."""
    response.headers[settings.pagination_header] = meta.model_dump_json(by_alias=True)
