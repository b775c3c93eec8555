import os

from config import optional_int

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

DEMO_SEED = optional_int(os.getenv("DEMO_SEED"))
DEMO_SAMPLE_SIZE = int(os.getenv("DEMO_SAMPLE_SIZE", "3"))
DEMO_VOLUNTEER_NAME = os.getenv("DEMO_VOLUNTEER_NAME", "JohnJoe Jones")
