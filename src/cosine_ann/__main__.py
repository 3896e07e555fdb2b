import sys

from cosine_ann.cli.main import main

sys.exit(main())
