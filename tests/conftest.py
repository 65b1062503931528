import os

# Keep telelog quiet on the console while the suite runs.
os.environ.setdefault("MOTION_ENGINE_DISABLE_CONSOLE", "1")
os.environ.setdefault("MOTION_ENGINE_LOG_LEVEL", "WARNING")
