from __future__ import annotations

import pytest
from django.core.exceptions import ImproperlyConfigured

from l10n_qa.services.config import WarningConfig
from l10n_qa.services.plurals import get_locale
from l10n_qa.services.registry import builtin_warnings


def test_defaults():
    config = WarningConfig()
    assert config.length_lower_bound == 0.2
    assert config.length_upper_bound == 5.0
    assert "art-xemoji" in config.length_exclude_languages
    assert "zh-tw" in config.languages_without_italics
    assert config.allowed_domain_changes["en.wikipedia.org"] == r"[^.]+\.wikipedia\.org"


def test_from_settings_without_overrides(settings):
    settings.L10N_QA_WARNINGS = {}
    assert WarningConfig.from_settings() == WarningConfig()


def test_from_settings_overrides(settings):
    settings.L10N_QA_WARNINGS = {
        "length_upper_bound": 2.0,
        "length_exclude_languages": ["th"],
    }
    config = WarningConfig.from_settings()

    assert config.length_upper_bound == 2.0
    assert config.length_exclude_languages == frozenset({"th"})

    warnings = builtin_warnings(config)
    report = warnings.check("Hello", None, {0: "Bonjour tout le monde"}, get_locale("fr"))
    assert report == {0: {"length": "Lengths of source and translation differ too much."}}


def test_from_settings_rejects_unknown_options(settings):
    settings.L10N_QA_WARNINGS = {"length_upper": 2.0}
    with pytest.raises(ImproperlyConfigured):
        WarningConfig.from_settings()


def test_from_settings_rejects_non_dict(settings):
    settings.L10N_QA_WARNINGS = ["length_upper_bound"]
    with pytest.raises(ImproperlyConfigured):
        WarningConfig.from_settings()


def test_invalid_bounds():
    with pytest.raises(ImproperlyConfigured):
        WarningConfig(length_lower_bound=3.0, length_upper_bound=2.0)


def test_allowed_domain_changes_are_read_only():
    config = WarningConfig()
    with pytest.raises(TypeError):
        config.allowed_domain_changes["example.com"] = ".*"
