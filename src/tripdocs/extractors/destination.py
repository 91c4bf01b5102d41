"""
Destination lookup against a static gazetteer.
"""

# Ordered by priority: the first entry present in the text wins,
# regardless of where in the text it appears.
DESTINATIONS = [
    "bangkok",
    "tokyo",
    "new york",
    "paris",
    "london",
    "rome",
    "sydney",
    "hong kong",
    "singapore",
    "dubai",
    "los angeles",
    "bali",
    "phuket",
    "seoul",
    "barcelona",
    "istanbul",
    "amsterdam",
    "miami",
    "shanghai",
    "las vegas",
    "milan",
    "madrid",
    "berlin",
    "vienna",
    "prague",
    "moscow",
    "athens",
    "cairo",
    "marrakesh",
    "johannesburg",
    "rio de janeiro",
    "toronto",
    "vancouver",
    "san francisco",
    "chicago",
    "boston",
    "orlando",
    "kyoto",
    "osaka",
    "taipei",
    "kuala lumpur",
    "delhi",
    "mumbai",
    "melbourne",
    "auckland",
    "fiji",
    "hawaii",
    "cancun",
    "mexico city",
    "chiang mai",
    "pattaya",
    "thailand",
    "japan",
]

UNKNOWN_DESTINATION = "Unknown"


def title_case_place(place: str) -> str:
    """Capitalize the first letter of each space-separated word."""
    return " ".join(word[:1].upper() + word[1:] for word in place.split(" "))


def extract_destination(text: str) -> str:
    """Return the first gazetteer entry found in the text, or "Unknown"."""
    normalized = text.lower()

    for place in DESTINATIONS:
        if place in normalized:
            return title_case_place(place)

    return UNKNOWN_DESTINATION
