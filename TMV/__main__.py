import sys

from TMV.cli import main

sys.exit(main())
