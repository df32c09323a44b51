"""Shared pytest configuration and fixtures for transchoice.

Hypothesis profiles (max_examples is set here and nowhere else):
- dev: 500 examples, the default for local runs
- ci: 50 derandomized examples, chosen automatically when CI=true
- verbose: 100 examples with per-example output

HYPOTHESIS_PROFILE=<name> selects a profile explicitly.

Tests marked @pytest.mark.fuzz run only with: pytest -m fuzz
"""

import json
import os
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]

settings.register_profile("dev", max_examples=500, phases=_PHASES, derandomize=False)
settings.register_profile(
    "ci", max_examples=50, phases=_PHASES, derandomize=True, print_blob=True
)
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=_PHASES,
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _select_profile() -> str:
    requested = os.environ.get("HYPOTHESIS_PROFILE")
    if requested in ("dev", "ci", "verbose"):
        return requested
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_select_profile())


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker."""
    config.addinivalue_line(
        "markers",
        "fuzz: long-running property tests, skipped unless selected with -m fuzz",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless the marker expression names them."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return
    skip_fuzz = pytest.mark.skip(reason="fuzz test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


# =============================================================================
# CATALOG FIXTURES
# =============================================================================

SAMPLE_CATALOGS: dict[str, dict[str, str]] = {
    "en": {
        "apples": ":count apple|:count apples",
        "messages.hello": "Hello :name",
    },
    "fr": {
        "apples": ":count pomme|:count pommes",
        "messages.hello": "Bonjour :name",
    },
    "ru": {
        "apples": ":count яблоко|:count яблока|:count яблок",
    },
    "pt-BR": {
        "messages.hello": "Olá :name",
    },
}


@pytest.fixture
def catalog_dir(tmp_path: Path) -> Path:
    """Directory of "{locale}.json" catalogs built from SAMPLE_CATALOGS."""
    for locale, catalog in SAMPLE_CATALOGS.items():
        (tmp_path / f"{locale}.json").write_text(
            json.dumps(catalog, ensure_ascii=False), encoding="utf-8"
        )
    return tmp_path
