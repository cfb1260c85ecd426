import sys

from stackiter._cli import main

sys.exit(main())
