"""Fakes shared by the test modules."""

from unittest.mock import MagicMock


def make_response(payload=None, error=None, json_error=None):
    """Build a fake requests.Response."""
    resp = MagicMock()
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = payload
    if error is not None:
        resp.raise_for_status.side_effect = error
    else:
        resp.raise_for_status.return_value = None
    return resp


def ok_envelope(**fields):
    return {"response": {"status": {"code": 0, "message": "Success"}, **fields}}


def sent_params(session, call=-1):
    """Query parameters of a recorded session.get call."""
    return session.get.call_args_list[call].kwargs["params"]
