"""
Custom exceptions for the HFSLIF image writer.
"""


class HFSLIFError(Exception):
    """Base exception for all HFSLIF writer errors."""
    pass


class ConfigurationError(HFSLIFError):
    """Invalid caller configuration, detected before any output is written."""
    pass


class InvalidFieldOptionError(ConfigurationError):
    """Invasm field option is not one of A, B, C or D."""
    pass


class PayloadTooLargeError(ConfigurationError):
    """Payload needs more records than the volume header can describe."""
    pass


class ImageIOError(HFSLIFError):
    """Error reading the payload or writing the image."""
    pass


class PayloadReadError(ImageIOError):
    """Input payload could not be read."""
    pass


class ImageWriteError(ImageIOError):
    """Output image could not be written."""
    pass
