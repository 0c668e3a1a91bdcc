import sys

from abi_console.cli import main

sys.exit(main())
