import sys

from fancontroller.app import main

sys.exit(main())
