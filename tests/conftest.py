import os

# Qt tests run headless unless a platform is already chosen.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
