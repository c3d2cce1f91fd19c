"""ABOUTME: Exceptions raised while looking up Pokemon type data.
ABOUTME: Both failure modes are user-facing and recovered at the CLI/UI boundary."""


class TypeAnalyzerError(Exception):
    """Base class for errors surfaced to the user."""


class CreatureNotFoundError(TypeAnalyzerError):
    """The requested Pokemon could not be resolved at the data source.

    Without a `reason` the source answered but doesn't know the name, so the
    message asks the user to check the spelling. With a `reason` the source
    couldn't be reached and the message shows the underlying error.
    """

    def __init__(self, identifier: str, reason: str | None = None) -> None:
        self.identifier = identifier
        self.reason = reason
        if reason is None:
            message = f"Pokemon '{identifier}' not found! Check the spelling and try again."
        else:
            message = f"Could not look up Pokemon '{identifier}': {reason}"
        super().__init__(message)


class RelationDataUnavailableError(TypeAnalyzerError):
    """A type's damage relations could not be retrieved."""

    def __init__(self, type_name: str, reason: str) -> None:
        self.type_name = type_name
        self.reason = reason
        super().__init__(f"Could not load damage relations for type '{type_name}': {reason}")
