"""Shared constants for the fixture page and its scenarios.

The roster order matters: tests that walk table cells rely on
Hollyonna Madwar sitting several rows down the list.
"""

# Wait budgets (seconds)
DEFAULT_WAIT_TIME = 2.0
DEFAULT_POLL_INTERVAL = 0.05
DEFAULT_ASYNC_TIMEOUT = 60.0

# Character classes, in the order the filter lists them
AVENGER = "Avenger"
BARBARIAN = "Barbarian"
BARD = "Bard"
CLERIC = "Cleric"
RANGER = "Ranger"
CLASSES = (AVENGER, BARBARIAN, BARD, CLERIC, RANGER)

# Character names
SHAROAR = "Sharoar Dewshining"
HOLLYONNA = "Hollyonna Madwar"
LEONAN = "Leonan Darksbane"
BRENNA = "Brenna Stoutforge"
TAMSIN = "Tamsin Reedwhistle"
GARRICK = "Garrick Ironvale"

ROSTER = (
    {"name": LEONAN, "class": BARBARIAN},
    {"name": SHAROAR, "class": AVENGER},
    {"name": BRENNA, "class": CLERIC},
    {"name": TAMSIN, "class": BARD},
    {"name": HOLLYONNA, "class": RANGER},
    {"name": GARRICK, "class": BARBARIAN},
)

# Fixture page script delays (ms)
INITIAL_LOAD_MS = 500
FILTER_START_MS = 200
FILTER_LOAD_MS = 800

# DOM hooks on the fixture page
CLASS_FILTER = "#class_filter"
CHARACTERS_LIST = "#characters_list"
FILTER_TITLE = "#filter_title"
LOADING = ".loading"
ALL_CLASSES_TITLE = "All classes"
