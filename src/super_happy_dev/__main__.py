import sys

from super_happy_dev.cli import main

sys.exit(main())
