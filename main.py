import sys

from equipment_tracker.cli import main

if __name__ == "__main__":
    sys.exit(main())
