from typing import List, Optional, Tuple

from werkzeug.http import parse_list_header, parse_options_header

from .constant import HTML_MEDIA_TYPE, MEDIA_TYPES


def _client_ranges(accept: str) -> List[Tuple[str, str, float, int]]:
    """``(type, subtype, quality, position)`` per usable range, header order."""
    ranges = []
    for position, item in enumerate(parse_list_header(accept)):
        value, options = parse_options_header(item)
        if value.count("/") != 1:
            continue
        try:
            quality = float(options.get("q", 1))
        except ValueError:
            continue
        type_, subtype = value.lower().split("/")
        ranges.append((type_, subtype, quality, position))
    return ranges


def _specificity(media_type: str, type_: str, subtype: str) -> Optional[int]:
    want_type, want_subtype = media_type.split("/")
    if type_ == want_type and subtype == want_subtype:
        return 2
    if type_ == want_type and subtype == "*":
        return 1
    if type_ == "*" and subtype == "*":
        return 0
    return None


def negotiate(accept: Optional[str]) -> str:
    """
    Pick the response media type for an ``Accept`` header value.

    Each candidate is judged by the most specific client range matching it.
    Candidates are then ranked by quality, specificity and the position of
    that range in the header; only a full tie falls back to the order of
    ``MEDIA_TYPES``. A missing or unusable header, or one that matches
    neither candidate, yields ``text/html``.
    """
    if not accept or not accept.strip():
        return HTML_MEDIA_TYPE
    ranges = _client_ranges(accept)

    best, best_key = HTML_MEDIA_TYPE, None
    for index, media_type in enumerate(MEDIA_TYPES):
        match = None
        for type_, subtype, quality, position in ranges:
            specificity = _specificity(media_type, type_, subtype)
            if specificity is None:
                continue
            candidate = (specificity, quality, -position)
            if match is None or candidate > match:
                match = candidate
        if match is None or match[1] <= 0:
            continue
        specificity, quality, neg_position = match
        key = (quality, specificity, neg_position, -index)
        if best_key is None or key > best_key:
            best, best_key = media_type, key
    return best
