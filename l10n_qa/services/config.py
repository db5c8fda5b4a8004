from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from .tokens import PLACEHOLDERS_PATTERN

SETTINGS_NAME = "L10N_QA_WARNINGS"

CJK_LANGUAGES = ("ja", "ko", "zh", "zh-hk", "zh-cn", "zh-sg", "zh-tw")


@dataclass(frozen=True)
class WarningConfig:
    length_lower_bound: float = 0.2
    length_upper_bound: float = 5.0
    # Character-count ratios are meaningless for these.
    length_exclude_languages: frozenset[str] = frozenset(("art-xemoji",) + CJK_LANGUAGES)
    languages_without_italics: frozenset[str] = frozenset(CJK_LANGUAGES)
    italic_tags: tuple[str, ...] = ("<em>", "</em>", "<i>", "</i>")
    # src and href are checked separately as links.
    changeable_attributes: tuple[str, ...] = ("title", "aria-label", "src", "href")
    # Host -> regex of the hosts a link to it may be rewritten to.
    allowed_domain_changes: Mapping[str, str] = field(
        default_factory=lambda: {
            "wordpress.org": r"[^.]+\.wordpress\.org",
            "wordpress.com": r"[^.]+\.wordpress\.com",
            "en.gravatar.com": r"[^.]+\.gravatar\.com",
            "en.wikipedia.org": r"[^.]+\.wikipedia\.org",
        }
    )
    placeholders_re: str = PLACEHOLDERS_PATTERN

    def __post_init__(self):
        if self.length_lower_bound < 0 or self.length_upper_bound <= self.length_lower_bound:
            raise ImproperlyConfigured(
                f"Invalid length bounds: {self.length_lower_bound} / {self.length_upper_bound}"
            )
        # Normalise list-like overrides coming from settings.
        for name in ("length_exclude_languages", "languages_without_italics"):
            object.__setattr__(self, name, frozenset(getattr(self, name)))
        for name in ("italic_tags", "changeable_attributes"):
            object.__setattr__(self, name, tuple(getattr(self, name)))
        object.__setattr__(
            self, "allowed_domain_changes", MappingProxyType(dict(self.allowed_domain_changes))
        )

    def replace(self, **overrides) -> WarningConfig:
        known = {f.name for f in dataclasses.fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ImproperlyConfigured(f"Unknown {SETTINGS_NAME} option(s): {', '.join(unknown)}")
        return dataclasses.replace(self, **overrides)

    @classmethod
    def from_settings(cls) -> WarningConfig:
        """Build a config from ``settings.L10N_QA_WARNINGS`` over the defaults."""

        overrides = getattr(settings, SETTINGS_NAME, None) or {}
        if not isinstance(overrides, dict):
            raise ImproperlyConfigured(f"{SETTINGS_NAME} must be a dict.")
        return cls().replace(**overrides)
