"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "MathQuiz"
WINDOW_MIN_WIDTH: int = 420
WINDOW_MIN_HEIGHT: int = 640
TICK_INTERVAL_MS: int = 100

TAB_HOME: str = "Home"
TAB_GAME: str = "Game"
TAB_SETTINGS: str = "Settings"

HOME_WELCOME: str = "Welcome! Use the tabs above to switch sections."
HOME_MESSAGE: str = "Your dashboard lives here."

GAME_MENU_SECTION: str = "Start Playing"
GAME_MODE_QUICK: str = "Quick Game"
GAME_MODE_DAILY: str = "Daily Puzzle"
GAME_MODE_CUSTOM: str = "Custom Game"
GAME_MODE_DESCRIPTIONS: dict[str, str] = {
    GAME_MODE_QUICK: "Ten questions against the clock.",
    GAME_MODE_DAILY: "Today's fixed set of questions.",
    GAME_MODE_CUSTOM: "Choose your configuration before starting the game.",
}

COUNTDOWN_TEMPLATE: str = "Get ready… {seconds}"
PROGRESS_TEMPLATE: str = "Question {number} of {total}"
INCORRECT_MESSAGE: str = "Incorrect. Try again."
INPUT_PLACEHOLDER: str = "?"
KEYPAD_CLEAR: str = "Clear"

RESULT_TITLE_COMPLETE: str = "Finished!"
RESULT_TITLE_TIMEOUT: str = "Time's up!"
RESULT_TIME_TEMPLATE: str = "Time: {elapsed}"
RESULT_ANSWERED_TEMPLATE: str = "Answered {answered} of {total}"
RESULT_BEST_TEMPLATE: str = "Best this session: {best}"
RESULT_NO_BEST: str = "Answer every question to set a best time."
PLAY_AGAIN_BUTTON: str = "Play Again"
HOME_BUTTON: str = "Home"

SETTINGS_APPEARANCE_GROUP: str = "Appearance"
SETTINGS_DARK_MODE: str = "Dark Mode"

ABANDON_ROUND_TITLE: str = "Leave round?"
ABANDON_ROUND_MESSAGE: str = "Your current round will be discarded. Continue?"
