import logging

from src.calculator import Calculator, InvalidArgument
from src.core.config import Config

logging.basicConfig(
    level=Config.LOG_LEVEL,
    format=Config.LOG_FORMAT,
)

logger = logging.getLogger("calcdemo.main")


def format_result(label: str, value: int) -> str:
    """Render one result line, e.g. ``Add: 15``."""
    return f"{label}: {value}"


def main() -> None:
    """Print the four demonstration results to stdout, one per line."""
    calc = Calculator()
    # order of the output lines is fixed
    steps = [
        ("Add", calc.add, Config.ADD_OPERANDS),
        ("Subtract", calc.subtract, Config.SUBTRACT_OPERANDS),
        ("Max", calc.max, Config.MAX_OPERANDS),
        ("Divide", calc.divide, Config.DIVIDE_OPERANDS),
    ]
    for label, operation, (a, b) in steps:
        try:
            value = operation(a, b)
        except InvalidArgument:
            logger.exception("%s failed for operands (%d, %d)", label, a, b)
            raise
        print(format_result(label, value))


if __name__ == "__main__":
    main()
