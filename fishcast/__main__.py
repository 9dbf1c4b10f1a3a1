import sys

from fishcast.cli import main

sys.exit(main())
