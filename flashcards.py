"""
Phraser: Adaptive Vocabulary Flashcards
---------------------------------------

Command-line entry point. Run `python flashcards.py --help` for commands.
"""

import sys

from phraser.cli import main


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n[!] Aborted by user.")
        sys.exit(1)
