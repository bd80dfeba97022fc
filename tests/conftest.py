"""
Pytest configuration and shared fixtures.
"""

import pytest
from unittest.mock import Mock
from typing import List, Optional


@pytest.fixture
def mock_session():
    """Create a mock ODataSession."""
    session = Mock()
    session.base = "https://test.example.com/odata/"
    session.timeout = 30.0
    session.verify = True
    return session


@pytest.fixture
def sample_people():
    """Sample People payload items."""
    return [
        {
            "UserName": "russellwhyte",
            "FirstName": "Russell",
            "LastName": "Whyte",
            "Gender": "Male",
            "Age": None,
            "Emails": ["Russell@example.com"],
            "AddressInfo": [
                {
                    "Address": "187 Suffolk Ln.",
                    "City": {"Name": "Boise", "CountryRegion": "United States", "Region": "ID"},
                }
            ],
            "FavoriteFeature": "Feature1",
            "Features": ["Feature1"],
        },
        {
            "UserName": "scottketchum",
            "FirstName": "Scott",
            "LastName": "Ketchum",
            "Gender": "Male",
            "Emails": ["Scott@example.com"],
            "AddressInfo": [],
        },
    ]


@pytest.fixture
def sample_odata_response(sample_people):
    """Sample OData v4 collection response with count."""
    return {
        "@odata.context": "https://test.example.com/odata/$metadata#People",
        "@odata.count": 20,
        "value": sample_people,
    }


@pytest.fixture
def sample_person_expanded(sample_people):
    """A person with Friends and Trips expanded."""
    person = dict(sample_people[0])
    person["Friends"] = [
        {"UserName": "scottketchum", "FirstName": "Scott", "LastName": "Ketchum", "Gender": "Male"},
    ]
    person["Trips"] = [
        {
            "TripId": 0,
            "ShareId": "9d9b2fa0-efbf-490e-a5e3-bac8f7d47354",
            "Name": "Trip in US",
            "Budget": 3000,
            "Description": "Trip from San Francisco to New York City",
            "Tags": ["business", "New York meeting"],
            "StartsAt": "2014-01-01T00:00:00Z",
            "EndsAt": "2014-01-04T00:00:00Z",
        }
    ]
    return person


class FakeConsole:
    """Scripted ConsoleIO stand-in that records everything written."""

    def __init__(self, inputs: Optional[List[str]] = None):
        self.inputs = list(inputs or [])
        self.output: List[str] = []
        self.cleared = 0

    def write(self, text: str = "") -> None:
        self.output.append(text)

    def write_line(self, text: str = "") -> None:
        self.output.append(text + "\n")

    def read_line(self) -> Optional[str]:
        if not self.inputs:
            return None
        return self.inputs.pop(0)

    def read_key(self) -> None:
        self.read_line()

    def clear(self) -> None:
        self.cleared += 1

    @property
    def text(self) -> str:
        return "".join(self.output)


@pytest.fixture
def fake_console():
    """Factory for scripted consoles."""
    return FakeConsole
