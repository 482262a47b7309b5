"""
Shared constants.

This module has no dependencies on models or services to avoid circular imports.
"""

# Hevy pagination
WORKOUTS_PAGE_SIZE = 10
EXERCISE_CATALOG_PAGE_SIZE = 100
EXERCISE_CATALOG_PAGES = 3

# Coaching prompts
MAX_PROMPT_WORKOUTS = 20
MAX_CATALOG_CANDIDATES = 300
ALLOWED_SESSION_COUNTS = (3, 5, 10, 20)
DEFAULT_SESSION_COUNT = 5

# Generated routines
AI_FOLDER_TITLE = "AI"
MIN_ROUTINE_SETS = 3
DEFAULT_ROUTINE_REPS = 10

# Maximum length for the free-text training philosophy
MAX_PHILOSOPHY_LENGTH = 2000

# Local cache slots
WORKOUTS_CACHE_SLOT = "hevy_workouts_cache"
ANALYSIS_CACHE_SLOT = "hevy_ai_analysis"
SETTINGS_SLOT = "hevy_spotter_settings"

# Analytics windows
HEATMAP_WEEKS = 53
VOLUME_MONTHS = 12
