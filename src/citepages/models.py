from pydantic import BaseModel, ConfigDict


class PageSegment(BaseModel):
    """One comma-delimited unit of a page field, a single page or a range.

    ``end`` is None for a single page. ``end_value`` is None when the end
    token is an "unknown page" marker such as ``??``.
    """

    model_config = ConfigDict(frozen=True)

    start: str
    end: str | None = None
    start_value: int
    end_value: int | None = None

    @property
    def is_range(self) -> bool:
        return self.end is not None

    @property
    def collapsed(self) -> bool:
        """True for a pseudo range such as ``10-10``."""
        return self.is_range and self.end_value == self.start_value

    @property
    def page_count(self) -> int | None:
        if not self.is_range:
            return 1
        if self.end_value is None:
            return None
        return self.end_value - self.start_value + 1

    @property
    def literal(self) -> str:
        if not self.is_range or self.collapsed:
            return self.start
        return f"{self.start}-{self.end}"


class PageRange(BaseModel):
    """Parsed bibliographic page field."""

    model_config = ConfigDict(frozen=True)

    literal: str
    page_first: str
    number_of_pages: int | None = None

    def __str__(self) -> str:
        return self.literal

    @property
    def is_single_page(self) -> bool:
        return self.number_of_pages == 1

    def to_csl(self) -> dict:
        """Return the CSL variables ``page``, ``page-first`` and
        ``number-of-pages``. The count is left out when it is unknown."""
        csl = {"page": self.literal, "page-first": self.page_first}
        if self.number_of_pages is not None:
            csl["number-of-pages"] = str(self.number_of_pages)
        return csl
