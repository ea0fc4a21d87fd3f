import sys

from simlocate.cli import main

sys.exit(main())
