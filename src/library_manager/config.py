"""Configuration and settings for Library Manager."""

APP_NAME = "Library Management System"

# Catalog limits
MAX_BOOKS = 5             # Books the catalog can hold
MAX_BORROW_PER_USER = 3   # Books one account may hold at a time
MIN_SEARCH_LENGTH = 3     # Shortest accepted search term

# Fixed accounts, in account-menu order. No credentials.
ACCOUNTS = [
    {
        "id": "librarian",
        "display_name": "Librarian (Admin)",
        "role": "admin",
    },
    {
        "id": "bob",
        "display_name": "Bob",
        "role": "member",
    },
    {
        "id": "steve",
        "display_name": "Steve",
        "role": "member",
    },
]

# Logging
DEFAULT_LOG_LEVEL = "WARNING"
