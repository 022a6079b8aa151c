"""hueflip - Invert colors and rotate their hue, like ``invert(1) hue-rotate(180deg)``."""

import logging

__version__ = "0.1.0"

# Configure logging for the entire package
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
