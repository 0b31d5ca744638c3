"""Console key decoding and screen output."""

from .console import ConsoleTerminal, default_byte_source
from .keys import ScanCodeDecoder

__all__ = ["ConsoleTerminal", "ScanCodeDecoder", "default_byte_source"]
