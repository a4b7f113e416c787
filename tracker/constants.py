HAPPINESS_MIN = -2
HAPPINESS_MAX = 2

HAPPINESS_LEVELS = {
    -2: "Very Unhappy 😢",
    -1: "Unhappy 😔",
    0: "Neutral 😐",
    1: "Happy 😊",
    2: "Very Happy 😄",
}

MEDIA_TYPES = {
    "book": "Book 📚",
    "video": "Video 🎬",
    "podcast": "Podcast 🎙️",
    "music": "Music 🎵",
}
MEDIA_TYPE_KEYS = list(MEDIA_TYPES.keys())
DEFAULT_MEDIA_TYPE = "book"
DEFAULT_MEDIA_DURATION = 30

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"

HAPPINESS_STORE_KEY = "happinessEntries"
MEDIA_STORE_KEY = "mediaEntries"
STORE_TABLE = "local_storage"

SAMPLE_HAPPINESS = [
    {"date": "2024-10-20", "happiness": 1},
    {"date": "2024-10-21", "happiness": -1},
    {"date": "2024-10-22", "happiness": 2},
    {"date": "2024-10-23", "happiness": 0},
]
SAMPLE_MEDIA = [
    {"id": "550e8400-e29b-41d4-a716-446655440000", "date": "2024-10-20", "type": "book", "title": "The Great Gatsby", "duration": 45},
    {"id": "550e8400-e29b-41d4-a716-446655440001", "date": "2024-10-21", "type": "video", "title": "Inception", "duration": 120},
    {"id": "550e8400-e29b-41d4-a716-446655440002", "date": "2024-10-22", "type": "podcast", "title": "Serial Episode 1", "duration": 60},
    {"id": "550e8400-e29b-41d4-a716-446655440003", "date": "2024-10-23", "type": "music", "title": "Abbey Road", "duration": 30},
]
