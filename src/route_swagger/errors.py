"""Exception types raised by route-swagger."""


class RouteSwaggerError(Exception):
    """Base class for all route-swagger errors."""


class ConfigurationError(RouteSwaggerError):
    """Invalid configuration. Aborts a generation run."""


class InvalidFormatError(RouteSwaggerError):
    """Unknown output format requested."""


class ManifestError(RouteSwaggerError):
    """Route manifest could not be read or validated."""


class DocBlockError(RouteSwaggerError):
    """A doc comment could not be parsed."""
