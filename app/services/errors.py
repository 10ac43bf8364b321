class ConnectionConfigError(ValueError):
    """Base class for invalid MongoDB connection settings."""


class NoHostsError(ConnectionConfigError):
    def __init__(self):
        super().__init__("at least one host is required")


class SRVRequiresOneHostError(ConnectionConfigError):
    def __init__(self):
        super().__init__("SRV connection requires exactly one host")


class SidecarReadError(ConnectionConfigError):
    def __init__(self, path: str):
        super().__init__(f"failed to read sidecar file: {path}")
        self.path = path


class SidecarFormatError(ConnectionConfigError):
    def __init__(self, path: str):
        super().__init__(f"invalid sidecar file format: {path}")
        self.path = path
