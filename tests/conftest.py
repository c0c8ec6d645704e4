import os
import sys

# Add src to pythonpath
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

# UI tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
