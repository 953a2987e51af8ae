"""
Hike Log Analytics — Configuration: source URL, fetch settings, scoring tables.
"""
import os

# ---------------------------------------------------------------------------
# Source — override with HIKELOG_SHEET_URL env var (published Google Sheet CSV)
# ---------------------------------------------------------------------------
SHEET_URL = os.environ.get("HIKELOG_SHEET_URL", "")

# Seconds to wait on the sheet before a refresh fails
FETCH_TIMEOUT = float(os.environ.get("HIKELOG_FETCH_TIMEOUT", "30"))

# ---------------------------------------------------------------------------
# Column discovery (substrings matched case-insensitively in header names)
# ---------------------------------------------------------------------------
MILES_HEADER_KEYWORDS = ["mile"]
ELEVATION_HEADER_KEYWORDS = ["elevation", "gain"]

UNKNOWN = "Unknown"

# ---------------------------------------------------------------------------
# Milestones — round-number hike ids worth celebrating
# ---------------------------------------------------------------------------
MILESTONE_IDS = frozenset({1, 25, 50, 100, 150, 200, 250, 300, 350})

# ---------------------------------------------------------------------------
# Demanding-hike score: miles * MILE_WEIGHT + elevation * ELEVATION_WEIGHT
# plus flat bonuses for priority locations and difficulty keywords
# ---------------------------------------------------------------------------
MILE_WEIGHT = 500.0
ELEVATION_WEIGHT = 1.0
PRIORITY_BONUS = 8000.0
KEYWORD_BONUS = 1000.0

PRIORITY_LOCATIONS = [
    "white mountain", "everest", "base camp", "nepal", "mount dana",
    "shiva murugan", "ohlone wilderness", "del valle", "sunol peak", "taylor ranch",
]

DIFFICULTY_KEYWORDS = [
    "strenuous", "tough", "challenging", "difficult", "steep", "uphill", "climb",
]

# ---------------------------------------------------------------------------
# Thematic categories (matched against comments, case-insensitive)
# ---------------------------------------------------------------------------
SCENIC_KEYWORDS = [
    "beautiful", "stunning", "gorgeous", "picturesque", "sunrise",
    "scenic", "serene", "view", "lush", "amazing",
]
WEATHER_KEYWORDS = [
    "windy", "rainy", "rain", "storm", "wind", "wet", "soaked", "chilly", "cold", "weather",
]
FOOD_KEYWORDS = [
    "breakfast", "pancakes", "eggs", "coffee", "diner", "eating",
    "meal", "food", "brunch", "bakery",
]

# ---------------------------------------------------------------------------
# Result caps
# ---------------------------------------------------------------------------
DEMANDING_LIMIT = 15
CATEGORY_LIMIT = 15
TOP_LOCATIONS_LIMIT = 5
