# gridmatrix/config.py
"""
Centralized configuration for the gridmatrix library.
This module provides a single source of truth for all configurable parameters.
"""

import numpy as np

# Element storage
DTYPE = np.float64  # Elements and products are kept in double precision

# Logging
LOGGER_NAME = "gridmatrix"
DEFAULT_LOG_LEVEL = "INFO"
CONSOLE_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DETAILED_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
