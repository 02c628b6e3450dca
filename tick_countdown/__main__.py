import sys

from tick_countdown.cli import main

sys.exit(main())
