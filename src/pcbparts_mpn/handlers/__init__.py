"""Manufacturer handlers."""

from .allegro import AllegroHandler
from .base import ManufacturerHandler
from .melexis import MelexisHandler
from .sensirion import SensirionHandler
from .st import STMicroHandler
from .ti import TexasInstrumentsHandler

# Handler classes used by MPNClassifier() when none are given
DEFAULT_HANDLERS: tuple[type[ManufacturerHandler], ...] = (
    TexasInstrumentsHandler,
    STMicroHandler,
    AllegroHandler,
    MelexisHandler,
    SensirionHandler,
)

__all__ = [
    "AllegroHandler",
    "DEFAULT_HANDLERS",
    "ManufacturerHandler",
    "MelexisHandler",
    "STMicroHandler",
    "SensirionHandler",
    "TexasInstrumentsHandler",
]
