from unittest.mock import Mock

import pytest

from royale_api.api_client import RoyaleApiClient
from royale_api.crawler import Crawler


@pytest.fixture
def crawler():
    return Mock(spec=Crawler)


@pytest.fixture
def client(crawler):
    return RoyaleApiClient.create("lala/", "abc", crawler=crawler)
