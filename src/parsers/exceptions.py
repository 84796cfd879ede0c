class HolderIntelError(Exception):
    """Fatal error for a single invocation. ``str(exc)`` is the user-facing reason."""


class InvalidMintError(HolderIntelError):
    pass


class NoHoldersError(HolderIntelError):
    pass


class TokenNotFoundError(HolderIntelError):
    pass
