import sys

from jair_harvester.cli import main

sys.exit(main())
