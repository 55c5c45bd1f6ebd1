import sys

from thinktool.cli import main

sys.exit(main())
