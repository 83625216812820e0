import sys

from flight_atlas.cli import main

sys.exit(main())
