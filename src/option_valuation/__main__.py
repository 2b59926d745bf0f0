import sys

from option_valuation.cli import main

sys.exit(main())
