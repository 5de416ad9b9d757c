"""
Run with: python -m unitcircle
"""
import sys

from unitcircle.main import main

sys.exit(main())
