from datetime import date
import pytest
from congregation_scheduler.roster import Roster, RosterEntry

TEST_ROSTER_ENTRIES = [
    RosterEntry("p-celio", "Célio"),
    RosterEntry("p-celio-horn", "Célio Horn"),
    RosterEntry("p-vilson", "Vilson"),
    RosterEntry("p-loni", "Loni"),
    RosterEntry("p-isolde", "Isolde"),
    RosterEntry("p-matheus", "Matheus Fernandes"),
    RosterEntry("p-marta", "Marta"),
]


@pytest.fixture
def roster():
    return Roster(TEST_ROSTER_ENTRIES)


@pytest.fixture
def today():
    return date(2024, 10, 1)
