import pytest
import httpx

from therapy_directory.loading.loader import DirectoryLoader

SHEET_URL = "https://sheets.example.test/pub?output=csv"

SAMPLE_CSV = (
    "Therapist Name,Specialty Group,Clinic Name,Address,Notes,Phone\r\n"
    "Jane Doe,CBT,Clinic A,1 Main St,Accepting new clients,555-0100\r\n"
    "Jane Doe,DBT,Clinic B,9 Other Rd,,555-0100\r\n"
    "John Roe,EMDR,Clinic B,2 Side Ave,,555-0101\r\n"
    ",EMDR,Clinic B,3 Nowhere,,\r\n"
    "Amy Poe,CBT,Clinic A,1 Main St,,\r\n"
)


@pytest.fixture
def sample_csv():
    """A small published-sheet export with a dropped row and a repeated name."""
    return SAMPLE_CSV


@pytest.fixture
def make_loader():
    """Builds a DirectoryLoader whose HTTP client answers with the given handler."""

    def _make(handler):
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        loader = DirectoryLoader(url=SHEET_URL, client=client)
        return loader

    return _make


@pytest.fixture
def csv_handler(sample_csv):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text=sample_csv)

    return handler
