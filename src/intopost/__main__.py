import sys

from intopost.cli import main

sys.exit(main())
