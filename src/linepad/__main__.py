import sys

from linepad.cli import main

sys.exit(main())
