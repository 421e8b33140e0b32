class DashboardError(Exception):
    """Base exception for all wildlife_dashboard errors"""
    pass

class ConfigError(DashboardError):
    """Invalid or inconsistent global.json"""
    pass

class LoadError(DashboardError):
    """
    The observation source could not be read or parsed:
    missing file, unreadable stream, malformed CSV, empty input
    """

    def __init__(self, message: str, source: str | None = None):
        self.source = source
        super().__init__(message)

class SessionNotReadyError(DashboardError):
    """An operation was invoked while the session is not in the READY state"""
    pass
