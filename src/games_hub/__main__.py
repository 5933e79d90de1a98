import sys

from games_hub.cli import main

if __name__ == '__main__':
    sys.exit(main())
