import sys

from svg2css.cli import main

sys.exit(main())
