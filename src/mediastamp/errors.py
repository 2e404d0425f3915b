"""Error taxonomy for mediastamp.

Every error is local to a single file group: none of these abort a run across
groups. The pipeline catches them at the group boundary and turns them into
notifier events.
"""


class MediastampError(Exception):
    """Base class for all mediastamp errors."""

    pass


class MetadataUnavailable(MediastampError):
    """Raised when the metadata provider fails or returns unparseable data.

    Never escapes a provider's ``fetch``; it is converted to "no timestamp".
    """

    pass


class AmbiguousGroup(MediastampError):
    """Raised when a group has more than one plausible primary file."""

    pass


class NoPrimaryFile(MediastampError):
    """Raised when a group holds only secondary files."""

    pass


class RenameFailure(MediastampError):
    """A forward rename failed and the group is being rolled back."""

    def __init__(self, source: object, error: OSError) -> None:
        super().__init__(f"{source}: {error}")
        self.source = source
        self.error = error


class RollbackFailure(MediastampError):
    """Restoring an original name failed.

    The file is left in neither its original nor its intended state, so this
    must always be reported.
    """

    def __init__(self, renamed: object, error: OSError) -> None:
        super().__init__(f"{renamed}: {error}")
        self.renamed = renamed
        self.error = error
