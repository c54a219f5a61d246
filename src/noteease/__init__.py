# SPDX-License-Identifier: MIT

from noteease.cleanup import register_cleanup
from noteease.initialize import initialize
from noteease.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
