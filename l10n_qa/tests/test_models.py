from __future__ import annotations

import pytest

from l10n_qa.models import Locale


@pytest.mark.django_db
def test_locale_row_implements_locale_contract():
    ru = Locale.objects.create(
        code="ru",
        name="Russian",
        nplurals=3,
        plural_rule=Locale.PluralRule.EAST_SLAVIC,
    )
    ru.refresh_from_db()

    assert ru.slug == "ru"
    assert str(ru) == "ru (Russian)"
    assert ru.numbers_for_index(0) == [1, 21, 31]
    assert ru.numbers_for_index(2) == [0, 5, 6]


@pytest.mark.django_db
def test_locale_with_unknown_rule_has_no_numbers():
    xx = Locale.objects.create(code="xx", name="Unknown", plural_rule="martian")
    assert xx.numbers_for_index(0) == []


@pytest.mark.django_db
def test_check_translations_with_locale_row():
    ru = Locale.objects.create(
        code="ru",
        name="Russian",
        nplurals=3,
        plural_rule=Locale.PluralRule.EAST_SLAVIC,
    )

    report = ru.check_translations(
        "One file",
        "%d files",
        {0: "Один файл", 1: "%d файла", 2: "файлов"},
    )
    assert report == {2: {"placeholders": "Missing %d placeholder in translation."}}


@pytest.mark.django_db
def test_single_form_locale_row_checks_plural_only():
    ja = Locale.objects.create(
        code="ja",
        name="Japanese",
        nplurals=1,
        plural_rule=Locale.PluralRule.NONPLURAL,
    )

    assert ja.check_translations("One file", "%d files", {0: "%d ファイル"}) is None
