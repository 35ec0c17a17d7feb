"""Project-wide constants."""

MONTHS = (
    "jan", "feb", "mar", "apr", "may", "jun",
    "jul", "aug", "sep", "oct", "nov", "dec",
)

SEASON = {
    "jan": "wet", "feb": "wet", "mar": "wet", "apr": "dry",
    "may": "dry", "jun": "dry", "jul": "dry", "aug": "dry",
    "sep": "dry", "oct": "dry", "nov": "wet", "dec": "wet",
}

# Display sentinel for absent data
MISSING_LABEL = "—"


def month_label(month: str) -> str:
    return month[:1].upper() + month[1:]
