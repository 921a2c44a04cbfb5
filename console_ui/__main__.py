import sys

from console_ui.main import main

sys.exit(main())
