import re
from typing import List

from citepages.models import PageRange, PageSegment

# Any run of ASCII hyphens and en dashes
PAT_RANGE_SEP = re.compile(r"[-\u2013]+")
PAT_DIGITS = re.compile(r"\d+", re.ASCII)


def normalize_dashes(segment: str) -> str:
    """Collapse every range separator in a segment to a single hyphen."""
    return PAT_RANGE_SEP.sub("-", segment)


def to_page_number(token: str) -> int | None:
    if not PAT_DIGITS.fullmatch(token):
        return None
    try:
        return int(token)
    except ValueError:
        # digit strings past the interpreter's int conversion limit
        return None


def resolve_segment(segment: str) -> PageSegment:
    """
    Resolve one comma-delimited segment such as '10', '10--20' or '10-??'.

    The start must be a page number. An end that is not a page number is kept
    verbatim as an unknown page marker.
    """
    parts = [part.strip() for part in normalize_dashes(segment).split("-")]

    if len(parts) > 2:
        raise ValueError(f"Segment '{segment}' has more than one range separator")

    start = parts[0]
    if not start:
        raise ValueError(f"Segment '{segment}' has no start page")

    start_value = to_page_number(start)
    if start_value is None:
        raise ValueError(f"Invalid start page '{start}' in segment '{segment}'")

    if len(parts) == 1:
        return PageSegment(start=start, start_value=start_value)

    end = parts[1]
    end_value = to_page_number(end)
    if end_value is not None and end_value < start_value:
        raise ValueError(
            f"End page {end_value} precedes start page {start_value} in '{segment}'"
        )

    return PageSegment(
        start=start, end=end, start_value=start_value, end_value=end_value
    )


def split_segments(value: str) -> List[PageSegment]:
    """Split a page field on commas and resolve each segment in order."""
    if not isinstance(value, str):
        raise TypeError(f"Page field must be a string, not {type(value).__name__}")

    if not value.strip():
        raise ValueError("Page field is empty")

    return [resolve_segment(part) for part in value.split(",")]


def aggregate(segments: List[PageSegment]) -> PageRange:
    if not segments:
        raise ValueError("No page segments to aggregate")

    literal = ",".join(seg.literal for seg in segments)

    # min() keeps the first of equal values, so '05,5' yields '05'
    first = min(segments, key=lambda seg: seg.start_value)

    counts = [seg.page_count for seg in segments]
    if any(count is None for count in counts):
        number_of_pages = None
    else:
        number_of_pages = sum(counts)

    return PageRange(
        literal=literal, page_first=first.start, number_of_pages=number_of_pages
    )


def parse_pages(value: str) -> PageRange:
    """Parse a BibTeX/CSL page field like '10-20,30--40,45' into a PageRange."""
    return aggregate(split_segments(value))
