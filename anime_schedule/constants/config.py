"""Runtime configuration constants."""

# AniList GraphQL API endpoint
ANILIST_API_URL = "https://graphql.anilist.co"

# Titles to look up, in display order
ANIME_TITLES = [
    "City the Animation",
    "Bad Girl",
    "My Dress-Up Darling Season 2",
    "Dandadan Season 2",
    "Rent-a-Girlfriend Season 4",
]

# Delay between API requests to stay under the AniList rate limit
DELAY_BETWEEN_REQUESTS_MS = 1000

# Per-request timeout in seconds (None = wait indefinitely)
REQUEST_TIMEOUT_SECONDS = None

# Cover shown when AniList has no image
PLACEHOLDER_COVER_URL = "https://placehold.co/400x600/1a202c/e2e8f0?text=Image+Not+Available"

# Airing times are displayed in India Standard Time (UTC+05:30)
IST_UTC_OFFSET_MINUTES = 5 * 60 + 30
