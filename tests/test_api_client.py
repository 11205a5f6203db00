"""
Tests for the base API client.

All tests use a mocked requests session; no network access.
"""

from unittest.mock import MagicMock

import pytest
import requests

from echonest.core.api_client import BaseAPIClient
from echonest.core.exceptions import (
    MalformedResponseError,
    RemoteApiError,
    TransportError,
)
from tests.helpers import make_response, ok_envelope, sent_params

# ============================================================================
# Test: options
# ============================================================================


class TestOptions:
    """Tests for set_option / get_option."""

    def test_set_option_returns_self(self, api):
        """Should support call chaining."""
        assert api.set_option("name", "rock") is api

    def test_get_option_returns_stored_value(self, api):
        """Should return what was stored, for any key."""
        api.set_option("name", "rock").set_option("anything", [1, 2])

        assert api.get_option("name") == "rock"
        assert api.get_option("anything") == [1, 2]

    def test_get_option_unset_returns_none(self, api):
        """Should return None, or the given default, when unset."""
        assert api.get_option("name") is None
        assert api.get_option("name", "fallback") == "fallback"

    def test_options_property_is_a_copy(self, api):
        """Should not expose the internal mapping."""
        api.set_option("name", "rock")
        api.options["name"] = "jazz"

        assert api.get_option("name") == "rock"


# ============================================================================
# Test: get
# ============================================================================


class TestGet:
    """Tests for the GET primitive."""

    def test_builds_url_and_standard_parameters(self, api, session):
        """Should call base_url + path with api key, format and parameters."""
        api.get("genre/list", {"results": 5})

        args, kwargs = session.get.call_args
        assert args[0] == "http://api.test/v4/genre/list"
        assert kwargs["params"] == {"results": 5, "api_key": "TESTKEY", "format": "json"}

    def test_returns_envelope(self, api, session):
        """Should return the decoded envelope on success."""
        envelope = ok_envelope(genres=[{"name": "rock"}])
        session.get.return_value = make_response(envelope)

        assert api.get("genre/list") == envelope

    def test_list_parameters_are_passed_as_lists(self, api, session):
        """Should hand lists to requests so they encode as repeated keys."""
        api.get("genre/profile", {"bucket": ["description", "urls"]})

        assert sent_params(session)["bucket"] == ["description", "urls"]

    def test_repeated_keys_in_encoded_url(self, api):
        """Should encode list values as repeated query keys."""
        params = api.build_parameters({"bucket": ["description", "urls"]})
        prepared = requests.Request("GET", "http://api.test/v4/genre/profile",
                                    params=params).prepare()

        assert "bucket=description&bucket=urls" in prepared.url

    def test_api_key_parameter_cannot_be_overridden(self, api, session):
        """Should always send the client's own key and format."""
        api.get("genre/list", {"api_key": "OTHER", "format": "xml"})

        params = sent_params(session)
        assert params["api_key"] == "TESTKEY"
        assert params["format"] == "json"

    def test_omits_missing_api_key(self, session):
        """Should not send an empty api_key parameter."""
        client = BaseAPIClient(api_key="", base_url="http://api.test/v4/",
                               session=session)

        client.get("genre/list")

        assert "api_key" not in sent_params(session)

    def test_timeout_option(self, api, session):
        """Should pass a per-request timeout through."""
        api.get("genre/list", options={"timeout": 3})

        assert session.get.call_args.kwargs["timeout"] == 3

    def test_non_zero_status_raises_remote_error(self, api, session):
        """Should surface the remote status message verbatim."""
        session.get.return_value = make_response(
            {"response": {"status": {"code": 5, "message": "Invalid API key"}}}
        )

        with pytest.raises(RemoteApiError) as excinfo:
            api.get("genre/list")

        assert str(excinfo.value) == "Invalid API key"
        assert excinfo.value.code == 5
        assert excinfo.value.message == "Invalid API key"

    def test_http_error_with_envelope_raises_remote_error(self, api, session):
        """Should prefer the envelope's message when an HTTP error carries one."""
        session.get.return_value = make_response(
            {"response": {"status": {"code": 1, "message": "Missing/ Invalid API Key"}}},
            error=requests.HTTPError("400 Client Error"),
        )

        with pytest.raises(RemoteApiError, match="Missing/ Invalid API Key"):
            api.get("genre/list")

    def test_http_error_without_envelope_is_reraised(self, api, session):
        """Should re-raise the requests error unchanged when there is no envelope."""
        error = requests.HTTPError("502 Bad Gateway")
        session.get.return_value = make_response(json_error=ValueError("no json"),
                                                 error=error)

        with pytest.raises(requests.HTTPError) as excinfo:
            api.get("genre/list")

        assert excinfo.value is error

    def test_transport_error_propagates(self, api, session):
        """Should let connection failures through unchanged."""
        error = requests.ConnectionError("boom")
        session.get.side_effect = error

        with pytest.raises(TransportError) as excinfo:
            api.get("genre/list")

        assert excinfo.value is error

    def test_non_json_body_raises_malformed(self, api, session):
        """Should raise MalformedResponseError for an undecodable body."""
        session.get.return_value = make_response(json_error=ValueError("bad"))

        with pytest.raises(MalformedResponseError):
            api.get("genre/list")

    def test_missing_status_raises_malformed(self, api, session):
        """Should raise MalformedResponseError when the status block is absent."""
        session.get.return_value = make_response({"response": {"genres": []}})

        with pytest.raises(MalformedResponseError):
            api.get("genre/list")

    def test_one_request_per_call(self, api, session):
        """Should never retry."""
        session.get.return_value = make_response(
            {"response": {"status": {"code": 3, "message": "Rate Limit"}}}
        )

        with pytest.raises(RemoteApiError):
            api.get("genre/list")

        assert session.get.call_count == 1


# ============================================================================
# Test: return_response
# ============================================================================


class TestReturnResponse:
    """Tests for return_response."""

    def test_extracts_named_field(self, api):
        """Should return exactly the requested field."""
        envelope = {"response": {"status": {"code": 0}, "genres": [{"name": "rock"}]}}

        assert api.return_response(envelope, "genres") == [{"name": "rock"}]

    def test_missing_field_raises(self, api):
        """Should raise MalformedResponseError naming the field."""
        envelope = {"response": {"status": {"code": 0}}}

        with pytest.raises(MalformedResponseError) as excinfo:
            api.return_response(envelope, "artists")

        assert excinfo.value.field == "artists"

    def test_missing_response_raises(self, api):
        """Should raise MalformedResponseError when there is no response block."""
        with pytest.raises(MalformedResponseError):
            api.return_response({}, "genres")


def test_default_session_is_created():
    """Should create its own requests session when none is given."""
    client = BaseAPIClient(api_key="K", logger=MagicMock())

    assert isinstance(client.session, requests.Session)
