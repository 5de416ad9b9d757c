import os

# Qt widgets in the tests never need a real display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
