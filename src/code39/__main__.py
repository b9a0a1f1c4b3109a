import sys

from src.code39.cli import main

sys.exit(main())
