import sys

from tokenguard.app_shell.cli import main

sys.exit(main())
