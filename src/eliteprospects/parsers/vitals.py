"""Biography block parser.

Profile pages render the player's vitals as a fixed sequence of label/value
pairs. The values share one CSS class and always appear in the same order:

    birthday, age, birth place, birth country, youth team,
    position, height, weight, shoots

Age and youth team are read but not kept; age is recomputed against the
draft eligibility date instead.
"""

import re
from datetime import date, datetime

import structlog
from bs4 import BeautifulSoup

from ..exceptions import DerivationError, InsufficientVitalsFields
from ..models import PlayerVitals
from ..utils import clean_cell

logger = structlog.get_logger()

VITALS_SELECTOR = '[class="col-xs-8 fac-lbl-dark"]'

VITALS_FIELDS = (
    "birthday",
    "age",
    "birth_place",
    "birth_country",
    "youth_team",
    "position_",
    "height",
    "weight",
    "shot_handedness",
)

DISCARDED_FIELDS = ("age", "youth_team")

BIRTHDAY_FORMATS = ("%b %d, %Y", "%B %d, %Y", "%m/%d/%Y", "%m-%d-%Y", "%b %d %Y")

_LEADING_NUMBER_RE = re.compile(r"^(\d+)")


def parse_birthday(text: str | None) -> date | None:
    """Parse a month/day/year date like 'Mar 05, 1999' or '03/05/1999'."""
    if text is None:
        return None
    for fmt in BIRTHDAY_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    raise DerivationError("birthday", text)


def parse_height(text: str | None) -> int | None:
    """
    Convert a feet/inches height to total inches.

    `5' 11"` -> 71, `6'0"` -> 72. Both the foot and the inch mark must
    be present.
    """
    if text is None:
        return None
    if "'" not in text or '"' not in text:
        raise DerivationError("height", text)

    feet_inches = text.split('"', 1)[0]
    feet, inches = feet_inches.split("'", 1)
    try:
        return int(feet.strip()) * 12 + int(inches.strip())
    except ValueError:
        raise DerivationError("height", text) from None


def parse_weight(text: str | None) -> int | None:
    """Parse weight like '185lbs' or '185 lbs' to pounds."""
    if text is None:
        return None
    if "lbs" not in text:
        raise DerivationError("weight", text)
    match = _LEADING_NUMBER_RE.match(text.split("lbs", 1)[0].strip())
    if not match:
        raise DerivationError("weight", text)
    return int(match.group(1))


def _derive(field: str, parser, raw: str | None, player_url: str):
    """Run a field parser, degrading unparseable values to None."""
    try:
        return parser(raw)
    except DerivationError as e:
        logger.debug(
            "vitals_field_unparseable",
            field=field,
            value=e.value,
            player_url=player_url,
        )
        return None


def extract_vitals_text(soup: BeautifulSoup) -> dict[str, str | None]:
    """Read the raw, cleaned vitals values keyed by field name."""
    nodes = soup.select(VITALS_SELECTOR)
    if len(nodes) < len(VITALS_FIELDS):
        raise InsufficientVitalsFields(found=len(nodes), expected=len(VITALS_FIELDS))

    values = [clean_cell(node.get_text(" ")) for node in nodes[: len(VITALS_FIELDS)]]
    return dict(zip(VITALS_FIELDS, values))


def parse_vitals(soup: BeautifulSoup, name: str, player_url: str) -> PlayerVitals:
    """
    Extract a player's vitals from a profile page.

    Args:
        soup: Parsed profile page
        name: Player name from the roster row
        player_url: Profile URL from the roster row

    Returns:
        PlayerVitals with height in inches and a typed birthday

    Raises:
        InsufficientVitalsFields: Fewer than nine vitals nodes on the page
    """
    raw = extract_vitals_text(soup)
    for field in DISCARDED_FIELDS:
        raw.pop(field)

    return PlayerVitals(
        birthday=_derive("birthday", parse_birthday, raw["birthday"], player_url),
        birth_place=raw["birth_place"],
        birth_country=raw["birth_country"],
        position_=raw["position_"],
        height=_derive("height", parse_height, raw["height"], player_url),
        weight=_derive("weight", parse_weight, raw["weight"], player_url),
        shot_handedness=raw["shot_handedness"],
        name_=clean_cell(name) or name,
        player_url_=clean_cell(player_url) or player_url,
    )
