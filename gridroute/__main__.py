import sys

from gridroute.cli import main

sys.exit(main())
