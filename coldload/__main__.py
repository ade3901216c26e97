import sys

from coldload.main import main

sys.exit(main())
