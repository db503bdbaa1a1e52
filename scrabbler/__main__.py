import sys

from scrabbler.cli import main

sys.exit(main())
