import sys

from clidle.cli import main

sys.exit(main())
