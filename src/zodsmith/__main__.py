import sys

from zodsmith.cli import main

sys.exit(main())
