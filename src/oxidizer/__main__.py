import sys

from oxidizer.cli import main

sys.exit(main())
