"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "Animal Quiz"
WINDOW_MIN_WIDTH: int = 480

QUESTION_HEADING_TEMPLATE: str = "Question {number} of {total}"
NEXT_BUTTON: str = "Next"
SEE_RESULT_BUTTON: str = "See Result"

RESULT_TITLE: str = "Your Animal Match"
RESULT_SCORE_TEMPLATE: str = "You scored {score} out of {total} points."
RESULT_MATCH_TEMPLATE: str = "You are most similar to a {category}!"
SHARE_TEXT_TEMPLATE: str = "I scored {score} on the Animal Quiz! Check it out: {url}"
SHARE_BUTTON: str = "Share"
RETAKE_BUTTON: str = "Retake Quiz"
SHARE_CONFIRM_TITLE: str = "Copied to clipboard"

ABOUT_BUTTON: str = "About"
SETTINGS_BUTTON: str = "Settings"

OPTION_VARIANT_SELECTED: str = "default"
OPTION_VARIANT_UNSELECTED: str = "outline"
