"""
Design (config.py)
- Purpose: Centralize constants and configuration.
- Inputs: None.
- Outputs: Constants (file names, env var names, search window, log defaults).
- Side effects: None.
- Thread-safety: N/A (read-only constants).
"""

# Persistence: backing file lives in <project root>/data (path resolved in storage module)
DATA_DIRNAME = "data"
RECORDS_FILENAME = "equipment.json"

# Set this to point the tracker at another backing file
RECORDS_FILE_ENV = "EQUIPMENT_TRACKER_FILE"

JSON_INDENT = 2

# Search only looks at the leading characters of name/status for substring hits
SEARCH_WINDOW = 5

# Selector code -> label shown by the front end (order matters for help text)
SELECTOR_LABELS = [
    ("O", "Operational"),
    ("I", "Inoperable"),
    ("N", "Needs Maintenance"),
    ("U", "Unknown"),
    ("M", "Missing"),
    ("D", "Damaged"),
]

LOG_LEVEL = "WARNING"
LOG_FORMAT = "text"  # "text" or "json"
LOG_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"
