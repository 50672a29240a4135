"""Shared pytest fixtures for Fuzzy TUI tests."""

import json

import pytest

from fuzzy_tui.config import Config, DisplayConfig, SearchConfig
from fuzzy_tui.models import Country


@pytest.fixture
def ladies():
    """Candidate used by the contiguity and range tests."""
    return "Ladies Wash, Cut & Blow Dry"


@pytest.fixture
def wash_candidates():
    """Candidates for the filtering test."""
    return [
        "Ladies Wash, Cut & Blow Dry",
        "Weird Assassin",
        "Wash & Go",
        "Go to wash",
    ]


@pytest.fixture
def sample_countries():
    """A handful of countries with accented names."""
    return [
        Country(code="AT", name="Austria", native="Österreich", capital="Vienna"),
        Country(code="DE", name="Germany", native="Deutschland", capital="Berlin"),
        Country(code="FO", name="Faroe Islands", native="Føroyar", capital="Tórshavn"),
        Country(code="RE", name="Réunion", native="La Réunion", capital="Saint-Denis"),
        Country(code="ST", name="São Tomé and Príncipe", native="São Tomé e Príncipe"),
    ]


@pytest.fixture
def countries_file(tmp_path):
    """Write a small country dataset and return its path."""
    path = tmp_path / "countries.json"
    path.write_text(
        json.dumps(
            {
                "countries": {
                    "DE": {"name": "Germany", "native": "Deutschland", "capital": "Berlin"},
                    "AT": {"name": "Austria", "native": "Österreich", "capital": "Vienna"},
                    "GR": {"name": "Greece", "native": "Ελλάδα"},
                }
            },
            ensure_ascii=False,
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def words_file(tmp_path):
    """Write a JSON word list and return its path."""
    path = tmp_path / "words.json"
    path.write_text(
        json.dumps(["la sartén", "la silla", "el sartenazo", "la víbora"], ensure_ascii=False),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def sample_config():
    """Configuration with no debounce, suited to tests."""
    return Config(
        search=SearchConfig(max_results=50, debounce_delay=0, workers=1),
        display=DisplayConfig(highlight_style="bold red", show_weights=False),
    )
