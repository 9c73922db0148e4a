import sys

from credrotate.cli import main

sys.exit(main())
