"""Static metadata describing Animal Quiz."""

APP_NAME = "Animal Quiz"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "Animal Quiz asks five quick questions about your favourite animals, "
    "keeps a tally of the animals behind your correct answers and tells you "
    "which one you are most similar to."
)
