from unittest.mock import MagicMock

import pytest
import requests

from selectshop_api.app.core.exceptions import ExternalServiceError
from selectshop_api.app.schemas.search import SearchItem
from selectshop_api.app.services.search_service import SearchClient


def _client(session, **kwargs):
    return SearchClient(
        base_url="https://search.example/shop.json",
        client_id="id",
        client_secret="secret",
        display=5,
        session=session,
        **kwargs,
    )


def _session_returning(payload):
    session = MagicMock()
    response = session.request.return_value
    response.raise_for_status.return_value = None
    response.json.return_value = payload
    return session


class TestSearchClient:
    """Tests for SearchClient.search_items."""

    def test_maps_items(self):
        session = _session_returning({
            "items": [
                {"title": "<b>Clean</b> Code", "link": "https://shop/1", "image": "https://img/1", "lprice": "25000"},
                {"title": "Refactoring", "link": "https://shop/2", "image": "", "lprice": ""},
            ]
        })

        items = _client(session).search_items("clean code")

        assert items[0] == SearchItem(title="Clean Code", link="https://shop/1", image="https://img/1", lowestPrice=25000)
        assert items[1].lowest_price == 0

    def test_sends_credentials_and_query(self):
        session = _session_returning({"items": []})

        _client(session).search_items("book")

        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "GET"
        assert kwargs["url"] == "https://search.example/shop.json"
        assert kwargs["params"]["query"] == "book"
        assert kwargs["params"]["display"] == 5
        assert kwargs["headers"] == {"X-Naver-Client-Id": "id", "X-Naver-Client-Secret": "secret"}

    def test_missing_items_yields_empty_list(self):
        assert _client(_session_returning({"total": 0})).search_items("x") == []

    def test_http_error_is_external_service_error(self):
        session = MagicMock()
        error_response = MagicMock(status_code=500)
        session.request.return_value.raise_for_status.side_effect = requests.HTTPError(response=error_response)

        with pytest.raises(ExternalServiceError):
            _client(session).search_items("x")

    def test_connection_error_is_external_service_error(self):
        session = MagicMock()
        session.request.side_effect = requests.ConnectionError("down")

        with pytest.raises(ExternalServiceError):
            _client(session).search_items("x")

    def test_unconfigured_credentials_never_call_the_api(self):
        session = MagicMock()
        client = SearchClient(base_url="https://search.example", client_id="", client_secret="", session=session)

        with pytest.raises(ExternalServiceError):
            client.search_items("x")

        session.request.assert_not_called()
