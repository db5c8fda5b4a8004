"""Built-in translation warnings.

Every rule takes ``(original, translation, locale)`` and returns a list of
:class:`~l10n_qa.services.messages.Problem`; an empty list means the
translation passed. Rules never raise on odd input, they just find fewer
tokens.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from . import messages
from .config import WarningConfig
from .messages import Problem
from .tokens import (
    changeable_attributes_re,
    difference,
    extract_custom_placeholders,
    extract_link_values,
    extract_tags,
    extract_urls,
    mask_attributes,
    placeholder_counts,
    positional_difference,
    split_host,
    swap_scheme,
    toggle_trailing_slash,
)

Rule = Callable[[str, str, object], list[Problem]]


def _slug(locale) -> str:
    return getattr(locale, "slug", "") or ""


class BuiltinWarnings:
    def __init__(self, config: WarningConfig | None = None):
        self.config = config or WarningConfig()
        self._attributes_re = changeable_attributes_re(self.config.changeable_attributes)
        self._placeholders_re = re.compile(self.config.placeholders_re)

    def rules(self) -> dict[str, Rule]:
        return {
            "length": self.length,
            "tags": self.tags,
            "placeholders": self.placeholders,
            "should_begin_on_newline": self.should_begin_on_newline,
            "should_not_begin_on_newline": self.should_not_begin_on_newline,
            "should_end_on_newline": self.should_end_on_newline,
            "should_not_end_on_newline": self.should_not_end_on_newline,
            "mismatching_urls": self.mismatching_urls,
            "mismatching_placeholders": self.mismatching_placeholders,
        }

    def add_all(self, translation_warnings) -> None:
        """Register every built-in rule on ``translation_warnings``."""

        for name, rule in self.rules().items():
            translation_warnings.add(name, rule)

    def length(self, original: str, translation: str, locale=None) -> list[Problem]:
        original = original or ""
        translation = translation or ""
        if _slug(locale) in self.config.length_exclude_languages:
            return []
        if original.startswith("number_format_"):
            return []
        if "_abbreviation" in original or "_initial" in original:
            return []

        len_src = len(original)
        len_trans = len(translation)
        if (
            self.config.length_lower_bound * len_src
            < len_trans
            < self.config.length_upper_bound * len_src
        ):
            return []
        return [Problem(messages.LENGTH)]

    def tags(self, original: str, translation: str, locale=None) -> list[Problem]:
        original_parts = extract_tags(original)
        translation_parts = extract_tags(translation)

        if (
            len(original_parts) > len(translation_parts)
            and _slug(locale) in self.config.languages_without_italics
        ):
            original_parts = difference(original_parts, self.config.italic_tags)

        if len(original_parts) > len(translation_parts):
            return [
                Problem(
                    messages.MISSING_TAGS,
                    {"tags": difference(original_parts, translation_parts)},
                )
            ]
        if len(original_parts) < len(translation_parts):
            return [
                Problem(
                    messages.EXTRA_TAGS,
                    {"tags": difference(translation_parts, original_parts)},
                )
            ]

        original_sorted = sorted(original_parts, reverse=True)
        translation_sorted = sorted(translation_parts, reverse=True)

        problems: list[Problem] = []

        if original_sorted == translation_sorted and original_parts != translation_parts:
            problems.append(
                Problem(
                    messages.TAGS_ORDER,
                    {"tags": positional_difference(translation_parts, original_parts)},
                )
            )

        # Both lists are sorted so matching tags line up; a repeated original
        # tag keeps only its last pairing.
        for original_tag, translation_tag in dict(zip(original_sorted, translation_sorted)).items():
            if original_tag == translation_tag:
                continue
            if mask_attributes(original_tag, self._attributes_re) != mask_attributes(
                translation_tag, self._attributes_re
            ):
                problems.append(
                    Problem(
                        messages.TAG_CHANGED,
                        {"original": original_tag, "translation": translation_tag},
                    )
                )

        original_links = "\n".join(extract_link_values(original_sorted))
        translation_links = "\n".join(extract_link_values(translation_sorted))
        if original_links or translation_links:
            problems.extend(self.links_without_url(original_links, translation_links))
            problems.extend(self.mismatching_urls(original_links, translation_links))

        return problems

    def links_without_url(self, original_links: str, translation_links: str) -> list[Problem]:
        """Compare the newline separated link values that are not URLs, e.g. anchors."""

        original_values = [
            value
            for value in difference(original_links.split("\n"), extract_urls(original_links))
            if value
        ]
        translation_values = [
            value
            for value in difference(translation_links.split("\n"), extract_urls(translation_links))
            if value
        ]

        missing = difference(original_values, translation_values)
        added = difference(translation_values, original_values)

        problems: list[Problem] = []
        if missing:
            problems.append(Problem(messages.MISSING_LINKS, {"links": missing}))
        if added:
            problems.append(Problem(messages.EXTRA_LINKS, {"links": added}))
        return problems

    def placeholders(self, original: str, translation: str, locale=None) -> list[Problem]:
        original_counts = placeholder_counts(original, self._placeholders_re)
        translation_counts = placeholder_counts(translation, self._placeholders_re)

        for placeholder in dict.fromkeys([*original_counts, *translation_counts]):
            original_count = original_counts[placeholder]
            translation_count = translation_counts[placeholder]
            if original_count > translation_count:
                return [Problem(messages.MISSING_PLACEHOLDER, {"placeholder": placeholder})]
            if original_count < translation_count:
                return [Problem(messages.EXTRA_PLACEHOLDER, {"placeholder": placeholder})]
        return []

    def should_begin_on_newline(self, original: str, translation: str, locale=None) -> list[Problem]:
        if (original or "").startswith("\n") and not (translation or "").startswith("\n"):
            return [Problem(messages.SHOULD_BEGIN_ON_NEWLINE)]
        return []

    def should_not_begin_on_newline(
        self, original: str, translation: str, locale=None
    ) -> list[Problem]:
        if not (original or "").startswith("\n") and (translation or "").startswith("\n"):
            return [Problem(messages.SHOULD_NOT_BEGIN_ON_NEWLINE)]
        return []

    def should_end_on_newline(self, original: str, translation: str, locale=None) -> list[Problem]:
        if (original or "").endswith("\n") and not (translation or "").endswith("\n"):
            return [Problem(messages.SHOULD_END_ON_NEWLINE)]
        return []

    def should_not_end_on_newline(self, original: str, translation: str, locale=None) -> list[Problem]:
        if not (original or "").endswith("\n") and (translation or "").endswith("\n"):
            return [Problem(messages.SHOULD_NOT_END_ON_NEWLINE)]
        return []

    def mismatching_urls(self, original: str, translation: str, locale=None) -> list[Problem]:
        """Flag plain-text URLs that were changed.

        A changed scheme (http <=> https) or trailing slash is accepted, as is
        moving an allow-listed host to one of its permitted subdomains.
        """

        original_urls = extract_urls(original)
        translation_urls = extract_urls(translation)

        missing = difference(original_urls, translation_urls)
        added = difference(translation_urls, original_urls)
        if not missing and not added:
            return []

        for missing_url in list(missing):
            alternate_scheme_url = swap_scheme(missing_url)
            alternates = (
                alternate_scheme_url,
                toggle_trailing_slash(missing_url),
                toggle_trailing_slash(alternate_scheme_url),
            )
            for alternate in alternates:
                if alternate in added:
                    added.remove(alternate)
                    if missing_url in missing:
                        missing.remove(missing_url)

        for missing_url in list(missing):
            parts = split_host(missing_url)
            if parts is None:
                continue
            prefix, host, remainder = parts
            allowed_host_re = self.config.allowed_domain_changes.get(host)
            if allowed_host_re is None:
                continue
            alternate_host_re = re.compile(
                f"^{re.escape(prefix)}{allowed_host_re}{re.escape(remainder)}$",
                re.IGNORECASE,
            )
            for added_url in list(added):
                if alternate_host_re.match(added_url):
                    added.remove(added_url)
                    if missing_url in missing:
                        missing.remove(missing_url)

        problems: list[Problem] = []
        if missing:
            problems.append(Problem(messages.MISSING_URLS, {"urls": missing}))
        if added:
            problems.append(Problem(messages.EXTRA_URLS, {"urls": added}))
        return problems

    def mismatching_placeholders(self, original: str, translation: str, locale=None) -> list[Problem]:
        """Flag ``###UPPER_SNAKE###`` placeholders that were dropped or invented."""

        original_placeholders = extract_custom_placeholders(original)
        translation_placeholders = extract_custom_placeholders(translation)

        missing = difference(original_placeholders, translation_placeholders)
        added = difference(translation_placeholders, original_placeholders)

        problems: list[Problem] = []
        if missing:
            problems.append(
                Problem(messages.MISSING_CUSTOM_PLACEHOLDERS, {"placeholders": missing})
            )
        if added:
            problems.append(Problem(messages.EXTRA_CUSTOM_PLACEHOLDERS, {"placeholders": added}))
        return problems
