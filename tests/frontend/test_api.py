"""
Tests for frontend/utils/api.py - Backend API client.

requests is patched; no backend is contacted.
"""
from unittest.mock import MagicMock, patch

import requests


def _response(status_code=200, json_data=None, text=None):
    resp = MagicMock()
    resp.status_code = status_code
    resp.text = text if text is not None else ("{}" if json_data is not None else "")
    resp.json.return_value = json_data
    return resp


class TestRequests:

    def test_token_is_sent_as_query_param(self, api_module, mock_streamlit):
        mock_streamlit.session_state.token = "jwt-abc"
        client = api_module.APIClient("http://api")

        with patch("requests.request", return_value=_response(json_data={"state": "ready"})) as mock_request:
            result = client.get_settings_page("roles")

        assert result == {"status": 200, "data": {"state": "ready"}}
        args, kwargs = mock_request.call_args
        assert args == ("GET", "http://api/settings/roles")
        assert kwargs["params"] == {"token": "jwt-abc"}

    def test_no_token_when_logged_out(self, api_module):
        client = api_module.APIClient("http://api")

        with patch("requests.request", return_value=_response(json_data={})) as mock_request:
            client.health()

        assert mock_request.call_args.kwargs["params"] == {}

    def test_mutations_send_json_body(self, api_module):
        client = api_module.APIClient("http://api")

        with patch("requests.request", return_value=_response(201, {"id": "pos1"})) as mock_request:
            client.create_position("Foreman", "FRM")

        args, kwargs = mock_request.call_args
        assert args == ("POST", "http://api/settings/positions")
        assert kwargs["json"] == {"name": "Foreman", "code": "FRM"}

    def test_update_project_uses_patch(self, api_module):
        client = api_module.APIClient("http://api")

        with patch("requests.request", return_value=_response(json_data={})) as mock_request:
            client.update_project("p1", {"name": "Bridge"})

        assert mock_request.call_args.args == ("PATCH", "http://api/settings/projects/p1")

    def test_empty_body_gives_none_data(self, api_module):
        client = api_module.APIClient("http://api")

        with patch("requests.request", return_value=_response(204, text="")):
            result = client.delete_role("r1")

        assert result == {"status": 204, "data": None}

    def test_non_json_body_is_returned_raw(self, api_module):
        client = api_module.APIClient("http://api")
        resp = _response(500, text="Internal Server Error")
        resp.json.side_effect = ValueError("no json")

        with patch("requests.request", return_value=resp):
            result = client.get_me()

        assert result == {"status": 500, "data": {"raw": "Internal Server Error"}}

    def test_connection_error(self, api_module, mock_api_responses):
        client = api_module.APIClient("http://api")

        with patch("requests.request", side_effect=requests.exceptions.ConnectionError()):
            result = client.list_calculations()

        assert result == mock_api_responses["connection_error"]


class TestErrorMessage:

    def test_detail_string(self, api_module, mock_api_responses):
        assert api_module.error_message(mock_api_responses["login_invalid"], "x") == "Invalid email or password"

    def test_validation_detail_list(self, api_module, mock_api_responses):
        message = api_module.error_message(mock_api_responses["validation_error"], "x")
        assert message == "Input should be greater than 0"

    def test_connection_error_text(self, api_module, mock_api_responses):
        assert api_module.error_message(mock_api_responses["connection_error"], "x") == "Cannot connect to backend"

    def test_default(self, api_module):
        assert api_module.error_message({"status": 500, "data": None}, "Something failed") == "Something failed"
