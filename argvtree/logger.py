# Argvtree CLI Grammar — (c) 2025 rtj.dev LLC — MIT Licensed
"""Package-wide logger for argvtree."""
import logging

logger = logging.getLogger("argvtree")
