"""Feature-level fixtures for i18n system tests.

Provides translation directories and dictionaries for resolution scenarios.
"""

import json

import pytest
import yaml

from tests.factories.i18n import make_dictionary


@pytest.fixture
def temp_locales_dir(tmp_path):
    """Create temporary directory with sample translation files.

    Returns a directory structure like:
    - en.yml
    - de.yml
    - incident.en.json
    - fr.toml
    """
    en = {
        "greeting": "Hello, World!",
        "special-greeting": "Hello, %{name}!!!",
        "missing": {"default": "Sorry, that translation doesn't exist."},
    }
    with open(tmp_path / "en.yml", "w", encoding="utf-8") as f:
        yaml.dump(en, f)

    de = {
        "greeting": "Hallo Welt!",
        "special-greeting": "Hallo, %{name}!!!",
    }
    with open(tmp_path / "de.yml", "w", encoding="utf-8") as f:
        yaml.dump(de, f)

    incident_en = {
        "incident": {
            "created": "Incident %{incident_id} created",
            "resolved": "Incident %{incident_id} resolved",
        }
    }
    with open(tmp_path / "incident.en.json", "w", encoding="utf-8") as f:
        json.dump(incident_en, f)

    (tmp_path / "fr.toml").write_text(
        'greeting = "Bonjour le monde!"\n\n[incident]\ncreated = "Incident %{incident_id} créé"\n',
        encoding="utf-8",
    )

    return tmp_path


@pytest.fixture
def dictionary():
    """Dictionary with English and German samples, default locale en."""
    return make_dictionary()


@pytest.fixture
def fallback_dictionary():
    """Dictionary where some keys only exist in the German fallback."""
    return make_dictionary(
        trees={
            "en": {"greeting": "Hello"},
            "de": {"greeting": "Hallo", "only_de": {"farewell": "Tschüss"}},
            "fr": {"greeting": "Bonjour"},
        },
        default_locale="en",
        fallback_locale="de",
    )
