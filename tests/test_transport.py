"""Tests for n26.transport and n26.token_source."""

from unittest.mock import Mock, patch

import pytest
import requests
from urllib3.exceptions import ProtocolError

from n26.errors import InvalidArgument, NetworkError
from n26.models import ClientConfig
from n26.token_source import BearerAuth, StaticTokenSource, TokenSource
from n26.transport import Transport

from conftest import RawBody, make_response


@pytest.fixture
def transport():
    return Transport(StaticTokenSource("access-abc"), ClientConfig(request_timeout=10))


class TestBuildUrl:
    """URL construction from path and query parameters."""

    def test_path_only(self, transport):
        assert transport.build_url("/api/accounts") == "https://api.tech26.de/api/accounts"

    def test_empty_values_are_omitted(self, transport):
        url = transport.build_url("/api/smrt/transactions", {"limit": "5", "from": None, "to": ""})
        assert url == "https://api.tech26.de/api/smrt/transactions?limit=5"

    def test_values_are_encoded(self, transport):
        url = transport.build_url("/api/search", {"q": "coffee & cake"})
        assert url == "https://api.tech26.de/api/search?q=coffee+%26+cake"

    def test_custom_base_url(self):
        transport = Transport(StaticTokenSource("t"), ClientConfig(base_url="http://localhost:8080"))
        assert transport.build_url("/api/me") == "http://localhost:8080/api/me"


class TestRequest:
    """Signed request/response handling."""

    @patch("requests.Session.request")
    def test_returns_raw_body(self, mock_request, transport):
        """Should return the body bytes without inspecting them."""
        mock_request.return_value = make_response(200, body=b'{"id": "acc"}')

        result = transport.request("GET", "/api/accounts")

        assert result == b'{"id": "acc"}'
        args, kwargs = mock_request.call_args
        assert args == ("GET", "https://api.tech26.de/api/accounts")
        assert kwargs["timeout"] == 10
        assert isinstance(kwargs["auth"], BearerAuth)

    @patch("requests.Session.request")
    def test_non_2xx_body_is_returned(self, mock_request, transport):
        """Should hand error bodies back unchanged; status is not checked here."""
        mock_request.return_value = make_response(500, body=b"Internal Server Error")

        assert transport.request("GET", "/api/me") == b"Internal Server Error"

    @patch("requests.Session.request")
    def test_method_is_case_insensitive(self, mock_request, transport):
        mock_request.return_value = make_response(200)

        transport.request("post", "/api/cards/c1/block")

        assert mock_request.call_args[0][0] == "POST"

    @patch("requests.Session.request")
    def test_unsupported_method(self, mock_request, transport):
        """Should fail fast without touching the network."""
        with pytest.raises(InvalidArgument):
            transport.request("DELETE", "/api/cards/c1")

        mock_request.assert_not_called()

    @patch("requests.Session.request")
    def test_connection_error(self, mock_request, transport):
        """Should wrap requests exceptions in NetworkError."""
        mock_request.side_effect = requests.ConnectionError("no route to host")

        with pytest.raises(NetworkError) as exc_info:
            transport.request("GET", "/api/accounts")

        assert isinstance(exc_info.value.__cause__, requests.ConnectionError)


class TestStream:
    """Streaming variant handing the body to a consumer."""

    @patch("requests.Session.request")
    def test_consumer_receives_body(self, mock_request, transport):
        """Should pass the open body to the consumer and return its result."""
        response = make_response(200, body=b"date,amount\n2024-01-01,-3.50\n")
        mock_request.return_value = response

        result = transport.stream("GET", "/api/smrt/reports/1/2/statements", None, lambda body: body.read())

        assert result == b"date,amount\n2024-01-01,-3.50\n"
        assert mock_request.call_args[1]["stream"] is True
        assert response.raw.closed

    @patch("requests.Session.request")
    def test_response_closed_when_consumer_fails(self, mock_request, transport):
        response = make_response(200, body=b"data")
        mock_request.return_value = response

        def consumer(body):
            raise OSError("disk full")

        with pytest.raises(OSError):
            transport.stream("GET", "/api/statements/s1", None, consumer)

        assert response.raw.closed

    @patch("requests.Session.request")
    def test_connection_dropped_mid_body(self, mock_request, transport):
        """Should raise NetworkError when the body is cut off while the consumer reads."""

        class TruncatedBody(RawBody):
            def read(self, *args, **kwargs):
                raise ProtocolError("Connection broken: IncompleteRead(12 bytes read, 88 more expected)")

        response = make_response(200)
        response.raw = TruncatedBody(b"")
        mock_request.return_value = response

        with pytest.raises(NetworkError, match="failed reading body"):
            transport.stream("GET", "/api/smrt/reports/1/2/statements", None, lambda body: body.read())

        assert response.raw.closed

    def test_close_releases_session(self):
        session = Mock(spec=requests.Session)
        session.headers = {}

        Transport(StaticTokenSource("access-abc"), session=session).close()

        session.close.assert_called_once_with()


class TestTokenSource:
    """Bearer token signing."""

    def test_static_token_source(self):
        source = StaticTokenSource("access-abc")
        assert source.token() == "access-abc"
        assert "access-abc" not in repr(source)

    def test_static_token_source_requires_token(self):
        with pytest.raises(ValueError):
            StaticTokenSource("")

    def test_token_source_is_abstract(self):
        with pytest.raises(TypeError):
            TokenSource()

    def test_bearer_auth_asks_source_per_request(self):
        """Should read the token on every request so a refreshing source can be swapped in."""

        class CountingSource(TokenSource):
            def __init__(self):
                self.calls = 0

            def token(self):
                self.calls += 1
                return f"token-{self.calls}"

        auth = BearerAuth(CountingSource())
        first = auth(requests.Request("GET", "https://api.tech26.de/api/me").prepare())
        second = auth(requests.Request("GET", "https://api.tech26.de/api/me").prepare())

        assert first.headers["Authorization"] == "Bearer token-1"
        assert second.headers["Authorization"] == "Bearer token-2"
