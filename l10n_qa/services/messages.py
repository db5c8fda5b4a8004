from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

from django.utils.translation import gettext_lazy as _

LENGTH = "length"
MISSING_TAGS = "missing_tags"
EXTRA_TAGS = "extra_tags"
TAGS_ORDER = "tags_order"
TAG_CHANGED = "tag_changed"
MISSING_LINKS = "missing_links"
EXTRA_LINKS = "extra_links"
MISSING_URLS = "missing_urls"
EXTRA_URLS = "extra_urls"
MISSING_PLACEHOLDER = "missing_placeholder"
EXTRA_PLACEHOLDER = "extra_placeholder"
MISSING_CUSTOM_PLACEHOLDERS = "missing_custom_placeholders"
EXTRA_CUSTOM_PLACEHOLDERS = "extra_custom_placeholders"
SHOULD_BEGIN_ON_NEWLINE = "should_begin_on_newline"
SHOULD_NOT_BEGIN_ON_NEWLINE = "should_not_begin_on_newline"
SHOULD_END_ON_NEWLINE = "should_end_on_newline"
SHOULD_NOT_END_ON_NEWLINE = "should_not_end_on_newline"

MESSAGES = {
    LENGTH: _("Lengths of source and translation differ too much."),
    MISSING_TAGS: _("Missing tags from translation. Expected: %(tags)s"),
    EXTRA_TAGS: _("Too many tags in translation. Found: %(tags)s"),
    TAGS_ORDER: _("Tags in incorrect order: %(tags)s"),
    TAG_CHANGED: _("Expected %(original)s, got %(translation)s."),
    MISSING_LINKS: _("The translation appears to be missing the following links: %(links)s"),
    EXTRA_LINKS: _("The translation contains the following unexpected links: %(links)s"),
    MISSING_URLS: _("The translation appears to be missing the following URLs: %(urls)s"),
    EXTRA_URLS: _("The translation contains the following unexpected URLs: %(urls)s"),
    MISSING_PLACEHOLDER: _("Missing %(placeholder)s placeholder in translation."),
    EXTRA_PLACEHOLDER: _("Extra %(placeholder)s placeholder in translation."),
    MISSING_CUSTOM_PLACEHOLDERS: _(
        "The translation appears to be missing the following placeholders: %(placeholders)s"
    ),
    EXTRA_CUSTOM_PLACEHOLDERS: _(
        "The translation contains the following unexpected placeholders: %(placeholders)s"
    ),
    SHOULD_BEGIN_ON_NEWLINE: _("Original and translation should both begin on newline."),
    SHOULD_NOT_BEGIN_ON_NEWLINE: _("Translation should not begin on newline."),
    SHOULD_END_ON_NEWLINE: _("Original and translation should both end on newline."),
    SHOULD_NOT_END_ON_NEWLINE: _("Translation should not end on newline."),
}

# Parameters rendered as comma-separated lists; tag lists use a space when missing/extra.
_LIST_SEPARATORS = {
    MISSING_TAGS: " ",
    EXTRA_TAGS: " ",
}


@dataclass(frozen=True)
class Problem:
    """A single rule failure: a message code plus the values it cites."""

    code: str
    params: dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> dict:
        return {"code": self.code, "message": render_problem(self), "details": dict(self.params)}


Formatter = Callable[[Problem], str]


def _join(values: Any, separator: str) -> str:
    if isinstance(values, str):
        return values
    if isinstance(values, Iterable):
        return separator.join(str(value) for value in values)
    return str(values)


def render_problem(problem: Problem) -> str:
    """Render a problem with the active Django translation catalog.

    Unknown codes render as the bare code so a message is never empty.
    """

    template = MESSAGES.get(problem.code)
    if template is None:
        return problem.code
    separator = _LIST_SEPARATORS.get(problem.code, ", ")
    params = {key: _join(value, separator) for key, value in problem.params.items()}
    return str(template) % params if params else str(template)


def render_problems(problems: Iterable[Problem], formatter: Formatter = render_problem) -> str:
    return "\n".join(formatter(problem) for problem in problems)
