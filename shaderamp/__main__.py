import sys

from shaderamp.cli import main

sys.exit(main())
