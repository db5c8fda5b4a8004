from __future__ import annotations

import logging
import threading
from collections.abc import Mapping, Sequence
from functools import lru_cache

from .config import WarningConfig
from .messages import Formatter, Problem, render_problem, render_problems
from .warnings import BuiltinWarnings, Rule

logger = logging.getLogger(__name__)

Report = dict[int, dict[str, str]]


def _translation_items(translations: Mapping[int, str] | Sequence[str] | None):
    if not translations:
        return []
    if isinstance(translations, Mapping):
        return list(translations.items())
    return list(enumerate(translations))


class TranslationWarnings:
    """A named set of warning rules run against every plural form of a translation."""

    def __init__(self, formatter: Formatter = render_problem):
        self.formatter = formatter
        self._rules: dict[str, Rule] = {}
        self._lock = threading.Lock()

    def add(self, name: str, rule: Rule) -> None:
        with self._lock:
            self._rules[name] = rule
        logger.debug("Registered translation warning %s", name)

    def remove(self, name: str) -> None:
        with self._lock:
            removed = self._rules.pop(name, None)
        if removed is not None:
            logger.debug("Removed translation warning %s", name)

    def has(self, name: str) -> bool:
        return name in self._rules

    register = add
    unregister = remove
    is_registered = has

    @property
    def names(self) -> list[str]:
        with self._lock:
            return list(self._rules)

    def check_problems(
        self,
        singular: str,
        plural: str | None,
        translations: Mapping[int, str] | Sequence[str] | None,
        locale,
    ) -> dict[int, dict[str, list[Problem]]]:
        """Like :meth:`check` but keeps the unrendered problems."""

        with self._lock:
            rules = list(self._rules.items())

        problems: dict[int, dict[str, list[Problem]]] = {}
        for index, translation in _translation_items(translations):
            if not translation:
                continue

            skip_singular = skip_plural = False
            if plural is not None:
                # A missing or zero plural count is read as a single form.
                if (locale.nplurals or 1) <= 1:
                    skip_singular = True
                elif 1 in locale.numbers_for_index(index):
                    skip_plural = True
                else:
                    skip_singular = True

            for name, rule in rules:
                if not skip_singular:
                    found = rule(singular, translation, locale)
                    if found:
                        problems.setdefault(index, {})[name] = list(found)
                if plural is not None and not skip_plural:
                    found = rule(plural, translation, locale)
                    if found:
                        problems.setdefault(index, {})[name] = list(found)

        return problems

    def check(
        self,
        singular: str,
        plural: str | None,
        translations: Mapping[int, str] | Sequence[str] | None,
        locale,
    ) -> Report | None:
        """Check translations of an original and return the warnings found.

        Returns None when no warnings were found, otherwise a mapping of
        translation index -> rule name -> message.
        """

        problems = self.check_problems(singular, plural, translations, locale)
        if not problems:
            return None

        report: Report = {
            index: {
                name: render_problems(found, self.formatter) for name, found in by_rule.items()
            }
            for index, by_rule in problems.items()
        }
        logger.debug(
            "Translation warnings for %s: %s",
            getattr(locale, "slug", locale),
            {index: sorted(by_rule) for index, by_rule in report.items()},
        )
        return report


def builtin_warnings(
    config: WarningConfig | None = None, formatter: Formatter = render_problem
) -> TranslationWarnings:
    translation_warnings = TranslationWarnings(formatter=formatter)
    BuiltinWarnings(config).add_all(translation_warnings)
    return translation_warnings


@lru_cache(maxsize=None)
def default_warnings() -> TranslationWarnings:
    """The process-wide registry with every built-in warning, configured from settings."""

    return builtin_warnings(WarningConfig.from_settings())
