from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable, Sequence
from urllib.parse import urlsplit

TAG_RE = re.compile(r"<[^>]*>")

PLACEHOLDERS_PATTERN = r"%(\d+\$(?:\d+)?)?[bcdefgosuxEFGX]"

CUSTOM_PLACEHOLDER_RE = re.compile(r"###[A-Z_]+###")

# http/https/schemeless URLs which are not wrapped in quotation marks, contain no
# whitespace and end on a plausible URL character.
URL_RE = re.compile(
    r"""(?<!['"])((https?://|(?<![:\w])//)[^\s<]+[a-z0-9\-_&=#/])(?!['"])""",
    re.IGNORECASE,
)

HREF_RE = re.compile(r"""<a[^>]+href=(['"])(?P<href>.+?)\1[^>]*>""", re.IGNORECASE)
SRC_RE = re.compile(r"""<[^>]+src=(['"])(?P<src>.+?)\1[^>]*>""", re.IGNORECASE)


def unique(values: Iterable[str]) -> list[str]:
    """Drop repeated values, keeping the first occurrence order."""

    return list(dict.fromkeys(values))


def difference(values: Iterable[str], other: Iterable[str]) -> list[str]:
    """Values not present anywhere in ``other``; duplicates in ``values`` are kept."""

    excluded = set(other)
    return [value for value in values if value not in excluded]


def positional_difference(values: Sequence[str], other: Sequence[str]) -> list[str]:
    """Values whose counterpart at the same position in ``other`` differs or is absent."""

    return [
        value
        for position, value in enumerate(values)
        if position >= len(other) or other[position] != value
    ]


def extract_tags(text: str | None) -> list[str]:
    if not text:
        return []
    return TAG_RE.findall(text)


def placeholder_counts(text: str | None, pattern: str | re.Pattern = PLACEHOLDERS_PATTERN) -> Counter[str]:
    counts: Counter[str] = Counter()
    if not text:
        return counts
    for match in re.finditer(pattern, text):
        counts[match.group(0)] += 1
    return counts


def extract_custom_placeholders(text: str | None) -> list[str]:
    if not text:
        return []
    return unique(CUSTOM_PLACEHOLDER_RE.findall(text))


def extract_urls(text: str | None) -> list[str]:
    if not text:
        return []
    return unique(match.group(0) for match in URL_RE.finditer(text))


def extract_link_values(tags: Sequence[str]) -> list[str]:
    """Return href values of ``<a>`` tags followed by src values of any tag."""

    joined = " ".join(tags)
    hrefs = [match.group("href") for match in HREF_RE.finditer(joined)]
    srcs = [match.group("src") for match in SRC_RE.finditer(joined)]
    return hrefs + srcs


def changeable_attributes_re(attributes: Iterable[str]) -> re.Pattern:
    names = "|".join(re.escape(attribute) for attribute in attributes)
    return re.compile(
        rf"""(\s*(?P<attr>{names}))=(['"])(?P<value>.+)\3(\s*)""",
        re.IGNORECASE,
    )


def mask_attributes(tag: str, pattern: re.Pattern) -> str:
    """Replace the quoted values of the matched attributes with ``...``."""

    return pattern.sub(r"\1=\3...\3\5", tag)


def url_scheme(url: str) -> str:
    try:
        return urlsplit(url).scheme
    except ValueError:
        # Malformed netloc, e.g. an unbalanced IPv6 bracket.
        return ""


def swap_scheme(url: str) -> str:
    scheme = url_scheme(url)
    if not scheme:
        return url
    alternate = "https" if scheme.lower() == "http" else "http"
    return alternate + url[len(scheme):]


def toggle_trailing_slash(url: str) -> str:
    if url.endswith("/"):
        return url.rstrip("/")
    return f"{url}/"


def split_host(url: str) -> tuple[str, str, str] | None:
    """Split ``url`` into (prefix, host, remainder) around its host name.

    Returns None when no host can be found.
    """

    try:
        host = urlsplit(url).hostname
    except ValueError:
        return None
    if not host:
        return None
    start = url.lower().find(host)
    if start < 0:
        return None
    end = start + len(host)
    return url[:start], url[start:end], url[end:]
