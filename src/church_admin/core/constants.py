"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100

DEFAULT_CITIZENSHIP = "Filipino"

# Reported for offerings/prayer requests without a linked member.
UNLINKED_USER_TYPE = "GUEST"
