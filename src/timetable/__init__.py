# SPDX-License-Identifier: MIT

from timetable.cleanup import register_cleanup
from timetable.initialize import initialize
from timetable.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
