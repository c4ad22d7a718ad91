import sys

from truthtable.cli import main

sys.exit(main())
