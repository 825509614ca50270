import sys

from clip_editor.cli import main

sys.exit(main())
