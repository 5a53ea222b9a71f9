import os
import sys

# helpers.py を各テストから import できるようにする
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))
