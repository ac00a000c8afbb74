import sys

from demoapi.cli import main

sys.exit(main())
