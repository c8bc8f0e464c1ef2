class DomainBrowserError(Exception):
    """Base exception for all domain_browser errors"""
    pass

class ConfigError(DomainBrowserError):
    """Invalid or unreadable global.json"""
    pass

class DatasetLoadError(DomainBrowserError):
    """
    The catalog CSV could not be read or parsed.
    Missing file, empty file, no header row, etc
    """
    pass
