import sys

from valref.cli import main

sys.exit(main())
