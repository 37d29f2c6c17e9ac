import sys

from daterename.cli import main

# Command-line entry point, same as the installed `daterename` command
if __name__ == "__main__":
    sys.exit(main())
