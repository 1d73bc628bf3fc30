import sys

from wrapmaze.maze_main import main

sys.exit(main())
