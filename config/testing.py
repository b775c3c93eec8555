import os

DEBUG = False
TESTING = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

# Fixed seed so demo output is reproducible under test
DEMO_SEED = 1234
DEMO_SAMPLE_SIZE = 3
DEMO_VOLUNTEER_NAME = "JohnJoe Jones"
