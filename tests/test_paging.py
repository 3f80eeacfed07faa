import pytest

from selectshop_api.app.core.exceptions import ValidationError
from selectshop_api.app.core.messages import ErrorCode, format_message
from selectshop_api.app.repositories.paging import MAX_ROW_INDEX, Page, PageRequest


class TestPageRequest:
    def test_offset(self):
        assert PageRequest.of(3, 10).offset == 30

    def test_order_clause_adds_id_tiebreak(self):
        request = PageRequest.of(0, 5, "lowestPrice", False)

        assert request.order_clause("p") == " ORDER BY p.lowest_price DESC, p.id DESC"

    def test_order_by_id_has_no_tiebreak(self):
        assert PageRequest.of(0, 5).order_clause() == " ORDER BY id ASC"

    def test_limit_clause(self):
        assert PageRequest.of(2, 4).limit_clause() == " LIMIT 4 OFFSET 8"

    @pytest.mark.parametrize("page,size", [(-1, 10), (0, 0)])
    def test_invalid_window(self, page, size):
        with pytest.raises(ValidationError) as exc_info:
            PageRequest.of(page, size)

        assert exc_info.value.code == ErrorCode.INVALID_PAGE

    @pytest.mark.parametrize("page,size", [(10**17, 100), (0, MAX_ROW_INDEX + 1), (MAX_ROW_INDEX, 1)])
    def test_window_past_sqlite_integer_range(self, page, size):
        with pytest.raises(ValidationError) as exc_info:
            PageRequest.of(page, size)

        assert exc_info.value.code == ErrorCode.INVALID_PAGE

    def test_last_representable_window(self):
        request = PageRequest.of(MAX_ROW_INDEX - 1, 1)

        assert request.limit_clause() == f" LIMIT 1 OFFSET {MAX_ROW_INDEX - 1}"

    def test_sort_field_is_allow_listed(self):
        with pytest.raises(ValidationError) as exc_info:
            PageRequest.of(0, 10, "id; DROP TABLE products")

        assert exc_info.value.params == {"field": "id; DROP TABLE products"}


class TestPage:
    def test_total_pages_rounds_up(self):
        assert Page(items=[], page=0, size=3, total_elements=7).total_pages == 3

    def test_empty(self):
        page = Page(items=[], page=0, size=10, total_elements=0)

        assert page.total_pages == 0


class TestMessages:
    def test_formats_parameters(self):
        assert format_message(ErrorCode.BELOW_MIN_MY_PRICE, "en", min_price=100) == "My price must be at least 100."

    def test_korean_table(self):
        assert format_message(ErrorCode.DUPLICATE_PRODUCT_FOLDER, "ko") == "중복된 폴더입니다."

    def test_unknown_locale_falls_back_to_english(self):
        assert format_message(ErrorCode.PRODUCT_NOT_FOUND, "fr") == "Product not found."

    def test_missing_parameter_returns_template(self):
        assert "{min_price}" in format_message(ErrorCode.BELOW_MIN_MY_PRICE, "en")
