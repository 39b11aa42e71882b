import sys

from gotris.cli import main

sys.exit(main())
