"""
hexview Exceptions

Exception hierarchy for the outer surfaces (config, CLI, cover input).
The viewport and resolver core never raises these for malformed data.
"""


class HexViewError(Exception):
    """Base exception for hexview"""

    pass


class ConfigurationError(HexViewError):
    """Invalid configuration value or unknown policy name"""

    pass


class GeometryError(HexViewError):
    """Cover geometry could not be parsed or is not a polygon"""

    pass


class InvalidCellError(HexViewError):
    """Cell identifier is not a valid cell of the grid"""

    pass
