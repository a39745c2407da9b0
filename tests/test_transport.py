"""
Unit tests for the requests based transport.
"""

from unittest.mock import Mock, patch

import pytest
import requests

from rapidspike_api import (
    Client,
    RequestsTransport,
    TransportError,
    HTTPStatusError
)
from rapidspike_api.constants import USER_AGENT


class TestRequestsTransport:
    """Test HTTP calls made through the requests session."""

    @pytest.fixture
    def transport(self):
        return RequestsTransport(USER_AGENT)

    def response(self, status_code=200, text='{}'):
        mock_response = Mock()
        mock_response.status_code = status_code
        mock_response.text = text
        return mock_response

    def test_user_agent(self, transport):
        assert transport.session.headers['User-Agent'] == USER_AGENT

    @patch('rapidspike_api.transport.requests.Session.request')
    def test_perform(self, mock_request, transport):
        mock_request.return_value = self.response(200, '{"id": 1}')

        result = transport.perform(
            'post', 'https://api.example.com/v1/websites/',
            {'Accept': 'application/json'}, {'a': 1}, b'{"b":2}', 10
        )

        assert result == (200, '{"id": 1}')
        args, kwargs = mock_request.call_args
        assert args == ('POST', 'https://api.example.com/v1/websites/')
        assert kwargs['headers'] == {'Accept': 'application/json'}
        assert kwargs['params'] == {'a': 1}
        assert kwargs['data'] == b'{"b":2}'
        assert kwargs['timeout'] == 10

    @patch('rapidspike_api.transport.requests.Session.request')
    def test_perform_without_body(self, mock_request, transport):
        mock_request.return_value = self.response()

        transport.perform('get', 'https://api.example.com/v1/', {}, {}, None, 10)

        args, kwargs = mock_request.call_args
        assert 'data' not in kwargs

    @patch('rapidspike_api.transport.requests.Session.request')
    def test_request_exception(self, mock_request, transport):
        mock_request.side_effect = requests.ConnectionError("refused")

        with pytest.raises(TransportError) as exc_info:
            transport.perform('get', 'https://api.example.com/v1/', {}, {}, None, 10)

        assert isinstance(exc_info.value.__cause__, requests.ConnectionError)

    @patch('rapidspike_api.transport.requests.Session.request')
    def test_timeout(self, mock_request, transport):
        mock_request.side_effect = requests.Timeout("read timed out")

        with pytest.raises(TransportError):
            transport.perform('get', 'https://api.example.com/v1/', {}, {}, None, 1)

    @patch('rapidspike_api.transport.requests.Session.request')
    def test_error_status(self, mock_request, transport):
        mock_request.return_value = self.response(401, '{"error": "Invalid signature"}')

        with pytest.raises(HTTPStatusError) as exc_info:
            transport.perform('get', 'https://api.example.com/v1/', {}, {}, None, 10)

        assert exc_info.value.status_code == 401
        assert exc_info.value.body == '{"error": "Invalid signature"}'
        assert isinstance(exc_info.value, TransportError)

    def test_close(self, transport):
        transport.session = Mock()
        transport.close()

        transport.session.close.assert_called_once()


class TestClientOverRequests:
    """Test the client end to end with the real transport and a mocked session."""

    @patch('rapidspike_api.transport.requests.Session.request')
    def test_signed_get(self, mock_request):
        mock_response = Mock()
        mock_response.status_code = 200
        mock_response.text = '[{"id": 5}]'
        mock_request.return_value = mock_response

        with Client("pub", "priv", "https://api.example.com") as client:
            result = client.websites(5).properties().dispatch("GET")

        assert result == [{"id": 5}]
        args, kwargs = mock_request.call_args
        assert args == ('GET', 'https://api.example.com/v1/websites/5/properties/')
        assert set(kwargs['params']) == {'public_key', 'time', 'signature'}
        assert kwargs['timeout'] == 10

    @patch('rapidspike_api.transport.requests.Session.request')
    def test_error_status_resets_client(self, mock_request):
        mock_response = Mock()
        mock_response.status_code = 404
        mock_response.text = ''
        mock_request.return_value = mock_response

        client = Client("pub", "priv")

        with pytest.raises(HTTPStatusError):
            client.websites(404).add_query_data({'page': 2}).dispatch("get")

        assert client._path == ''
        assert client._query_data == {}
