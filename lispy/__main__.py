import logging

from lispy.config import get_log_level
from lispy.interpreter import repl


def main() -> None:
    logging.basicConfig(level=get_log_level())
    repl()


if __name__ == "__main__":
    main()
