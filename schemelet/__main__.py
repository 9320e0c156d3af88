import sys

from schemelet.repl import main

sys.exit(main())
