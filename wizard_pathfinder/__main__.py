import sys

from wizard_pathfinder.app import main

sys.exit(main())
