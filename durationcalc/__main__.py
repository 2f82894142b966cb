import sys

from durationcalc.cli import main

sys.exit(main())
