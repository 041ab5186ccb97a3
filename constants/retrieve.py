MIN_TOKEN_LENGTH = 3
DEFAULT_N_RESULTS = 5
RECENT_FALLBACK_LIMIT = 3
