"""
Entry point: python -m flappy [db_file]
"""

import logging
import sys

from .constants import DB_FILE


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    # Imported here so the simulation package stays usable without a display
    from .flappy_client import FlappyClient

    db_file = argv[0] if argv else DB_FILE
    FlappyClient(db_file).run()


if __name__ == "__main__":
    main()
