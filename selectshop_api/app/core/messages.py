"""
User‑facing message templates.

Every domain error is identified by an ``ErrorCode``; the text shown to
API clients is looked up here by locale and code and rendered with
``str.format`` placeholders.  Keeping the table separate from the
exceptions lets the wording change (or gain a locale) without touching
the code that raises them.
"""

from enum import Enum
from typing import Dict, Optional

from .config import settings


class ErrorCode(str, Enum):
    BELOW_MIN_MY_PRICE = "BELOW_MIN_MY_PRICE"
    PRODUCT_NOT_FOUND = "PRODUCT_NOT_FOUND"
    FOLDER_NOT_FOUND = "FOLDER_NOT_FOUND"
    NOT_OWNER = "NOT_OWNER"
    DUPLICATE_PRODUCT_FOLDER = "DUPLICATE_PRODUCT_FOLDER"
    DUPLICATE_FOLDER_NAME = "DUPLICATE_FOLDER_NAME"
    DUPLICATE_USERNAME = "DUPLICATE_USERNAME"
    DUPLICATE_EMAIL = "DUPLICATE_EMAIL"
    INVALID_ADMIN_TOKEN = "INVALID_ADMIN_TOKEN"
    INVALID_SORT_FIELD = "INVALID_SORT_FIELD"
    INVALID_PAGE = "INVALID_PAGE"
    INVALID_FOLDER_NAME = "INVALID_FOLDER_NAME"
    SEARCH_UNAVAILABLE = "SEARCH_UNAVAILABLE"


MESSAGES: Dict[str, Dict[ErrorCode, str]] = {
    "en": {
        ErrorCode.BELOW_MIN_MY_PRICE: "My price must be at least {min_price}.",
        ErrorCode.PRODUCT_NOT_FOUND: "Product not found.",
        ErrorCode.FOLDER_NOT_FOUND: "Folder not found.",
        ErrorCode.NOT_OWNER: "The product or the folder does not belong to you.",
        ErrorCode.DUPLICATE_PRODUCT_FOLDER: "The product is already in this folder.",
        ErrorCode.DUPLICATE_FOLDER_NAME: "Folder '{name}' already exists.",
        ErrorCode.DUPLICATE_USERNAME: "Username '{username}' is already taken.",
        ErrorCode.DUPLICATE_EMAIL: "Email '{email}' is already registered.",
        ErrorCode.INVALID_ADMIN_TOKEN: "Invalid admin token.",
        ErrorCode.INVALID_SORT_FIELD: "Cannot sort by '{field}'.",
        ErrorCode.INVALID_PAGE: "Page or size is out of range.",
        ErrorCode.INVALID_FOLDER_NAME: "Folder name must not be blank.",
        ErrorCode.SEARCH_UNAVAILABLE: "The product search service is unavailable.",
    },
    "ko": {
        ErrorCode.BELOW_MIN_MY_PRICE: "최저 희망가는 최소 {min_price}원 이상으로 설정해 주세요.",
        ErrorCode.PRODUCT_NOT_FOUND: "해당 상품이 존재하지 않습니다.",
        ErrorCode.FOLDER_NOT_FOUND: "해당 폴더가 존재하지 않습니다.",
        ErrorCode.NOT_OWNER: "관심상품이 아니거나 회원님의 폴더가 아닙니다.",
        ErrorCode.DUPLICATE_PRODUCT_FOLDER: "중복된 폴더입니다.",
        ErrorCode.DUPLICATE_FOLDER_NAME: "중복된 폴더명을 제거해주세요! 폴더명: {name}",
        ErrorCode.DUPLICATE_USERNAME: "중복된 사용자가 존재합니다: {username}",
        ErrorCode.DUPLICATE_EMAIL: "중복된 이메일입니다: {email}",
        ErrorCode.INVALID_ADMIN_TOKEN: "관리자 암호가 틀려 등록이 불가능합니다.",
        ErrorCode.INVALID_SORT_FIELD: "정렬할 수 없는 항목입니다: {field}",
        ErrorCode.INVALID_PAGE: "페이지 번호나 크기가 허용 범위를 벗어났습니다.",
        ErrorCode.INVALID_FOLDER_NAME: "폴더명을 입력해 주세요.",
        ErrorCode.SEARCH_UNAVAILABLE: "상품 검색 서비스를 사용할 수 없습니다.",
    },
}

FALLBACK_LOCALE = "en"


def format_message(code: ErrorCode, locale: Optional[str] = None, **params) -> str:
    """Render the message for ``code`` in ``locale``.

    Unknown locales fall back to English.  A template whose
    placeholders are not all supplied is returned unformatted rather
    than raising, so a missing parameter never hides the original
    error.
    """
    table = MESSAGES.get(locale or settings.default_locale) or MESSAGES[FALLBACK_LOCALE]
    template = table.get(code) or MESSAGES[FALLBACK_LOCALE][code]
    try:
        return template.format(**params)
    except KeyError:
        return template
