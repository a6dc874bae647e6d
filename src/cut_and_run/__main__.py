import sys

from cut_and_run.cli import main

sys.exit(main())
