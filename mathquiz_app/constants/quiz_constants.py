"""Quiz-related constants shared across UI and core layers."""

DEFAULT_QUESTION_COUNT: int = 10
DEFAULT_ROUND_DURATION_SECONDS: int = 60
DEFAULT_COUNTDOWN_SECONDS: int = 5

MIN_QUESTION_COUNT: int = 1
MAX_QUESTION_COUNT: int = 50
MIN_ROUND_DURATION_SECONDS: int = 10
MAX_ROUND_DURATION_SECONDS: int = 600
MIN_COUNTDOWN_SECONDS: int = 1
MAX_COUNTDOWN_SECONDS: int = 10

MULTIPLICATION_OPERAND_RANGE: tuple[int, int] = (1, 9)
ADDITION_OPERAND_RANGE: tuple[int, int] = (2, 99)
SUBTRACTION_LEFT_RANGE: tuple[int, int] = (2, 99)
SUBTRACTION_RIGHT_MIN: int = 2
DIVISION_DIVISOR_RANGE: tuple[int, int] = (2, 12)
DIVISION_QUOTIENT_RANGE: tuple[int, int] = (2, 12)

TIME_LOW_WARNING_SECONDS: int = 10
