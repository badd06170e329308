import sys

from sizefill.cli import main

sys.exit(main())
