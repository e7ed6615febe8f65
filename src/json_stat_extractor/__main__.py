import sys

from json_stat_extractor.cli import main

sys.exit(main())
