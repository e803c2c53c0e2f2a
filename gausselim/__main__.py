import sys

from gausselim.main import main

sys.exit(main())
