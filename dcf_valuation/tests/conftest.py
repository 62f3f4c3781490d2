import os

# Keep test runs from appending to the service log file
os.environ["DCF_LOG_FILE"] = ""
