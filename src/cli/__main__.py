import sys

from src.cli.menu import main

sys.exit(main())
