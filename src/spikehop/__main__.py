import sys

from spikehop.app.game_app import main

sys.exit(main())
