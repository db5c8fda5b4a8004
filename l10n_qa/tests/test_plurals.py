from __future__ import annotations

import pytest

from l10n_qa.services.plurals import (
    LOCALE_PRESETS,
    PLURAL_RULES,
    get_locale,
    get_plural_rule,
    numbers_for_index,
)


@pytest.mark.parametrize(
    "rule, index, expected",
    [
        ("nonplural", 0, [0, 1, 2]),
        ("one_other", 0, [1]),
        ("one_other", 1, [0, 2, 3]),
        ("zero_one_other", 0, [0, 1]),
        ("east_slavic", 0, [1, 21, 31]),
        ("east_slavic", 1, [2, 3, 4]),
        ("east_slavic", 2, [0, 5, 6]),
        ("polish", 0, [1]),
        ("polish", 2, [0, 5, 6]),
        ("czech", 1, [2, 3, 4]),
        ("arabic", 3, [3, 4, 5]),
        ("arabic", 4, [11, 12, 13]),
        ("arabic", 5, [100, 101, 102]),
        ("irish", 4, [0, 11, 12]),
        ("slovenian", 0, [1, 101, 201]),
    ],
)
def test_numbers_for_index(rule, index, expected):
    assert numbers_for_index(rule, index) == expected


def test_numbers_for_index_limits():
    assert numbers_for_index("one_other", 1, how_many=5) == [0, 2, 3, 4, 5]
    assert numbers_for_index("one_other", 1, test_up_to=3) == [0, 2]
    assert numbers_for_index("one_other", 7) == []


def test_presets_are_consistent():
    for locale in LOCALE_PRESETS:
        assert locale.plural_rule in PLURAL_RULES, locale.slug
        indexes = {locale.index_for_number(n) for n in range(1000)}
        assert indexes == set(range(locale.nplurals)), locale.slug


def test_plural_locale_descriptor():
    ru = get_locale("ru")
    assert ru.nplurals == 3
    assert ru.index_for_number(22) == 1
    assert ru.numbers_for_index(0) == [1, 21, 31]


def test_unknown_lookups_raise():
    with pytest.raises(LookupError):
        get_locale("does-not-exist")
    with pytest.raises(LookupError):
        get_plural_rule("martian")
