import sys

from u8codec.main import main

sys.exit(main())
