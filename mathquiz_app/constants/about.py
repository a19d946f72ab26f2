"""Static metadata describing MathQuiz."""

APP_NAME = "MathQuiz"
APP_VERSION = "0.1"
ORGANIZATION_NAME = "MathQuiz"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "MathQuiz is a small tabbed app built with Qt. "
    "Race the clock through a round of mental arithmetic and beat your best time."
)

HOW_TO_PLAY_MARKDOWN = (
    "### How to play\n\n"
    "1. Open the **Game** tab and pick *Quick Game*, *Daily Puzzle* or *Custom Game*.\n"
    "2. Wait for the countdown, then type each answer on the keypad.\n"
    "3. A correct answer moves on by itself. A wrong one is cleared so you can retry.\n\n"
    "The *Daily Puzzle* has the same questions for everyone all day."
)
