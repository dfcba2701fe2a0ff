import pytest

from poolroute.shared.navigation import PAGES, create_page_url, resolve_page


@pytest.mark.parametrize(
    "path, page",
    [
        ("/", "Home"),
        ("", "Home"),
        (None, "Home"),
        ("/Home", "Home"),
        ("/customerdetail", "CustomerDetail"),
        ("/CustomerDetail?id=abc", "CustomerDetail"),
        ("/app/Notes/", "Notes"),
        ("/does-not-exist", "Home"),
    ],
)
def test_resolve_page(path, page):
    assert resolve_page(path) == page


def test_home_is_first_page():
    assert PAGES[0] == "Home"
    assert len(PAGES) == 12


def test_create_page_url_with_params():
    assert create_page_url("NewServiceLog", customerId="a b") == "/NewServiceLog?customerId=a+b"
    assert create_page_url("CustomerDetail", id="x", tab=None) == "/CustomerDetail?id=x"
    assert create_page_url("Notes") == "/Notes"


def test_create_page_url_rejects_unknown_page():
    with pytest.raises(ValueError):
        create_page_url("Settings")


def test_vocabularies_endpoint(client):
    body = client.get("/vocabularies").json()
    assert body["service_days"][-1] == "Saturday"
    assert body["chemical_types"][-1] == "Other"
    assert body["reading_levels"] == ["low", "good", "high", "critical"]
    assert body["note_priorities"] == ["low", "medium", "high"]
