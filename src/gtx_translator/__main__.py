import sys

from gtx_translator.main import main

sys.exit(main())
