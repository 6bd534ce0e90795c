"""Global constants for the torneo application."""

# Firestore paths
TOURNAMENT_COLLECTION = "torneos"
TOURNAMENT_DOCUMENT = "torneo-fixture"
ARTIFACTS_COLLECTION = "artifacts"
BETS_COLLECTION = "bets"

# Bet document fields
BET_MATCH = "match"
BET_TEAM1 = "team1"
BET_TEAM2 = "team2"
BET_ON = "betOn"
BET_TIMESTAMP = "timestamp"
BET_USER_ID = "userId"

# Tournament document fields
GROUPS = "groups"
KNOCKOUT_STAGE = "knockoutStage"
TOP_SCORERS = "topScorers"
LEAST_BEATEN_KEEPERS = "leastBeatenKeepers"
LATEST_NEWS = "latestNews"
LIVE_STREAM_URL = "liveStreamUrl"

# Session keys
SESSION_USER_ID = "user_id"
SESSION_IS_ADMIN = "is_admin"

# Defaults
DEFAULT_APP_ID = "default-app-id"
DEFAULT_ADMIN_PASSWORD = "admin123"  # nosec B105
DEFAULT_SITE_URL = "https://torneodefutbol.app"
PLACEHOLDER_TEAM = "TBD"
WELCOME_NEWS = "Bienvenidos al Torneo de Fútbol. ¡Mucha suerte a todos los equipos!"
MATCH_SEPARATOR = " vs "
BET_STAKE_POINTS = 5

# Record codec delimiters
RECORD_SEPARATOR = ";"
FIELD_SEPARATOR = ","

# Navigation: (endpoint, label)
NAV_PAGES = [
    ("tournament.home", "Inicio"),
    ("tournament.fixture", "Fixture"),
    ("tournament.stats", "Goleadores y Vallas"),
    ("tournament.media", "Fotos y Videos"),
    ("bets.betting", "Apuestas"),
    ("admin.panel", "Admin"),
]

# Version detection
VERSION_THRESHOLD = 10
VERSION_SHORT_LENGTH = 7
