import pytest
from bs4 import BeautifulSoup


@pytest.fixture
def get_page(client):
    """Fetch a path and return (response, parsed document)."""
    def _get(path):
        response = client.get(path)
        return response, BeautifulSoup(response.content, "lxml")
    return _get
