"""
Pydantic models for the external product search.

``SearchItem`` is one listing returned by the shopping search API,
normalised to the fields a tracked product stores.
"""

from typing import Any, Dict

from pydantic import BaseModel, Field


class SearchItem(BaseModel):
    title: str = Field(..., example="Clean Code")
    link: str = Field(..., example="https://search.shopping.naver.com/gate.nhn?id=123")
    image: str = Field("", example="https://shopping-phinf.pstatic.net/main_123/123.jpg")
    lowest_price: int = Field(..., ge=0, alias="lowestPrice", example=1000)

    model_config = {
        "populate_by_name": True,
    }

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> "SearchItem":
        """Build from one raw item of the search API response.

        The API wraps matched words in ``<b>`` tags and sends prices as
        strings; an empty price is treated as 0.
        """
        title = str(item.get("title", "")).replace("<b>", "").replace("</b>", "")
        raw_price = str(item.get("lprice") or "0").strip()
        return cls(
            title=title,
            link=item.get("link", ""),
            image=item.get("image", ""),
            lowest_price=int(raw_price) if raw_price.isdigit() else 0,
        )
