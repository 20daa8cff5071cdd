import sys

from lambda_exercises.main import main

sys.exit(main())
