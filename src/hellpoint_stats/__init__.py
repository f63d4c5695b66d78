"""
Hellpoint save inspector.

Finds the Hellpoint save directory, reads the JSON ``.hp`` saves it holds and
reports the selected character's name, level and playtime.
"""
import logging

__version__ = "0.1.0"

__all__ = [
    "__version__",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
