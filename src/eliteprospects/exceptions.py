"""Exceptions raised while scraping player profiles."""


class ScraperError(Exception):
    """Base class for all scraper errors."""


class FetchError(ScraperError):
    """A profile page could not be retrieved or is not HTML."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to fetch {url}: {reason}")


class ParseError(ScraperError):
    """The page does not have the expected structure."""


class InsufficientVitalsFields(ParseError):
    """Fewer biography nodes than expected were found."""

    def __init__(self, found: int, expected: int):
        self.found = found
        self.expected = expected
        super().__init__(f"Expected {expected} vitals fields, found {found}")


class MissingStatsTable(ParseError):
    """The season statistics table is absent."""

    def __init__(self):
        super().__init__("Player statistics table not found")


class UnexpectedStatsLayout(ParseError):
    """A statistics row does not have the expected number of columns."""

    def __init__(self, row_number: int, found: int, expected: int):
        self.row_number = row_number
        self.found = found
        self.expected = expected
        super().__init__(
            f"Statistics row {row_number} has {found} columns, expected {expected}"
        )


class MalformedSeasonFill(ParseError):
    """The first statistics row has no season to carry forward."""

    def __init__(self):
        super().__init__("First statistics row has no season value")


class DerivationError(ScraperError, ValueError):
    """A raw value could not be converted to its typed form."""

    def __init__(self, field: str, value: str):
        self.field = field
        self.value = value
        super().__init__(f"Cannot derive {field} from {value!r}")


class PlayerScrapeError(ScraperError):
    """Processing failed for a single player."""

    def __init__(self, player_url: str, cause: Exception):
        self.player_url = player_url
        self.cause = cause
        super().__init__(f"{player_url}: {cause}")
