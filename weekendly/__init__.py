"""
Weekendly - holiday-aware weekend planner.

This package detects upcoming long weekends around a static holiday table
and suggests what to do with them.
"""

import logging

__version__ = "0.1.0"
__app_name__ = "Weekendly"

# Library code never configures handlers; the CLI does that.
logging.getLogger(__name__).addHandler(logging.NullHandler())
