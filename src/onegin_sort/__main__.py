import sys

from onegin_sort.cli import main

sys.exit(main())
