import os

from config import optional_int

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Unset seed means a different shift sample on every run
DEMO_SEED = optional_int(os.getenv("DEMO_SEED"))
DEMO_SAMPLE_SIZE = int(os.getenv("DEMO_SAMPLE_SIZE", "3"))
DEMO_VOLUNTEER_NAME = os.getenv("DEMO_VOLUNTEER_NAME", "JohnJoe Jones")
