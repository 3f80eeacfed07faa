"""
Search endpoint for API v1.

Proxies the external shopping search so the client can pick a listing
to track.  The handler is synchronous because the search client blocks
on HTTP; FastAPI runs it in its thread pool.
"""

from typing import List

from fastapi import APIRouter, Depends, Query

from selectshop_api.app.core.security import get_current_user
from selectshop_api.app.models import User
from selectshop_api.app.schemas.search import SearchItem
from selectshop_api.app.services.search_service import SearchClient, get_search_client


router = APIRouter()


@router.get("", response_model=List[SearchItem])
def search_items(
    query: str = Query(..., min_length=1),
    client: SearchClient = Depends(get_search_client),
    current_user: User = Depends(get_current_user),
) -> List[SearchItem]:
    return client.search_items(query)
