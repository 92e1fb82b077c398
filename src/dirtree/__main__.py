import sys

from dirtree.cli import main

sys.exit(main())
