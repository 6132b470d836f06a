import sys

from reminder_cli.cli import main

sys.exit(main())
