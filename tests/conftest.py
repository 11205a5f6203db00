"""Shared fixtures: a mocked requests session and clients built on it."""

from unittest.mock import MagicMock

import pytest

from echonest.core.api_client import BaseAPIClient
from echonest.core.genre_client import GenreClient
from tests.helpers import make_response, ok_envelope


@pytest.fixture
def session():
    session = MagicMock()
    session.get.return_value = make_response(ok_envelope(genres=[], artists=[]))
    return session


@pytest.fixture
def api(session):
    return BaseAPIClient(api_key="TESTKEY", base_url="http://api.test/v4/",
                         session=session, logger=MagicMock())


@pytest.fixture
def genre(api):
    return GenreClient(api)
