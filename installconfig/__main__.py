import sys

from installconfig.cli import main

sys.exit(main())
