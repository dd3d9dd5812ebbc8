# src/cli_task_manager/__main__.py

import sys

from cli_task_manager.cli.main import main

sys.exit(main())
