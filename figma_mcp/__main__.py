import sys

from figma_mcp.ui.cli.app import main

sys.exit(main())
