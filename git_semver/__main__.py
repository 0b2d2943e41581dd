import sys

from git_semver.cli import main

sys.exit(main())
