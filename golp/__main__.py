import sys

from golp.repl import main

sys.exit(main())
