import sys

from spotcheck.cli import main

sys.exit(main())
