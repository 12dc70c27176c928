import sys

from radixcalc.cli import main

sys.exit(main())
