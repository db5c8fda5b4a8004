from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


def _east_slavic(n: int) -> int:
    if n % 10 == 1 and n % 100 != 11:
        return 0
    if 2 <= n % 10 <= 4 and not 12 <= n % 100 <= 14:
        return 1
    return 2


def _polish(n: int) -> int:
    if n == 1:
        return 0
    if 2 <= n % 10 <= 4 and not 12 <= n % 100 <= 14:
        return 1
    return 2


def _arabic(n: int) -> int:
    if n <= 2:
        return n
    if 3 <= n % 100 <= 10:
        return 3
    if n % 100 >= 11:
        return 4
    return 5


def _irish(n: int) -> int:
    if n == 1:
        return 0
    if n == 2:
        return 1
    if 3 <= n <= 6:
        return 2
    if 7 <= n <= 10:
        return 3
    return 4


def _slovenian(n: int) -> int:
    mod = n % 100
    if mod == 1:
        return 0
    if mod == 2:
        return 1
    if mod in (3, 4):
        return 2
    return 3


def _romanian(n: int) -> int:
    if n == 1:
        return 0
    if n == 0 or 1 <= n % 100 <= 19:
        return 1
    return 2


def _lithuanian(n: int) -> int:
    if n % 10 == 1 and n % 100 != 11:
        return 0
    if n % 10 >= 2 and not 10 <= n % 100 < 20:
        return 1
    return 2


# Gettext-style rules: cardinal number -> plural form index.
PLURAL_RULES: dict[str, Callable[[int], int]] = {
    "nonplural": lambda n: 0,
    "one_other": lambda n: 0 if n == 1 else 1,
    "zero_one_other": lambda n: 0 if n <= 1 else 1,
    "east_slavic": _east_slavic,
    "czech": lambda n: 0 if n == 1 else (1 if 2 <= n <= 4 else 2),
    "polish": _polish,
    "arabic": _arabic,
    "irish": _irish,
    "slovenian": _slovenian,
    "romanian": _romanian,
    "lithuanian": _lithuanian,
}


def get_plural_rule(name: str) -> Callable[[int], int]:
    try:
        return PLURAL_RULES[name]
    except KeyError as exc:
        raise LookupError(f"Unknown plural rule: {name}") from exc


def numbers_for_index(
    plural_rule: str,
    index: int,
    *,
    how_many: int = 3,
    test_up_to: int = 1000,
) -> list[int]:
    """Return the first ``how_many`` numbers below ``test_up_to`` that map to ``index``."""

    rule = get_plural_rule(plural_rule)
    numbers: list[int] = []
    for number in range(test_up_to):
        if rule(number) == index:
            numbers.append(number)
            if len(numbers) >= how_many:
                break
    return numbers


@dataclass(frozen=True)
class PluralLocale:
    slug: str
    name: str
    nplurals: int
    plural_rule: str

    def index_for_number(self, number: int) -> int:
        return get_plural_rule(self.plural_rule)(number)

    def numbers_for_index(self, index: int, how_many: int = 3, test_up_to: int = 1000) -> list[int]:
        return numbers_for_index(
            self.plural_rule, index, how_many=how_many, test_up_to=test_up_to
        )


LOCALE_PRESETS: list[PluralLocale] = [
    PluralLocale(slug="en", name="English", nplurals=2, plural_rule="one_other"),
    PluralLocale(slug="de", name="German", nplurals=2, plural_rule="one_other"),
    PluralLocale(slug="es", name="Spanish", nplurals=2, plural_rule="one_other"),
    PluralLocale(slug="fr", name="French", nplurals=2, plural_rule="zero_one_other"),
    PluralLocale(
        slug="pt-br", name="Portuguese (Brazil)", nplurals=2, plural_rule="zero_one_other"
    ),
    # Logographic / no plural distinction
    PluralLocale(slug="ja", name="Japanese", nplurals=1, plural_rule="nonplural"),
    PluralLocale(slug="ko", name="Korean", nplurals=1, plural_rule="nonplural"),
    PluralLocale(slug="zh-cn", name="Chinese (China)", nplurals=1, plural_rule="nonplural"),
    PluralLocale(slug="zh-tw", name="Chinese (Taiwan)", nplurals=1, plural_rule="nonplural"),
    PluralLocale(slug="art-xemoji", name="Emoji", nplurals=1, plural_rule="nonplural"),
    # Slavic and Baltic languages
    PluralLocale(slug="ru", name="Russian", nplurals=3, plural_rule="east_slavic"),
    PluralLocale(slug="uk", name="Ukrainian", nplurals=3, plural_rule="east_slavic"),
    PluralLocale(slug="cs", name="Czech", nplurals=3, plural_rule="czech"),
    PluralLocale(slug="pl", name="Polish", nplurals=3, plural_rule="polish"),
    PluralLocale(slug="sl", name="Slovenian", nplurals=4, plural_rule="slovenian"),
    PluralLocale(slug="lt", name="Lithuanian", nplurals=3, plural_rule="lithuanian"),
    PluralLocale(slug="ro", name="Romanian", nplurals=3, plural_rule="romanian"),
    PluralLocale(slug="ga", name="Irish", nplurals=5, plural_rule="irish"),
    PluralLocale(slug="ar", name="Arabic", nplurals=6, plural_rule="arabic"),
]

_PRESETS_BY_SLUG: dict[str, PluralLocale] = {locale.slug: locale for locale in LOCALE_PRESETS}


def get_locale(slug: str) -> PluralLocale:
    try:
        return _PRESETS_BY_SLUG[slug]
    except KeyError as exc:
        raise LookupError(f"Locale not found: {slug}") from exc
