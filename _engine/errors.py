class AICommitError(Exception):
    """Base class for every failure that aborts a git-aicommit run."""


class ConfigurationError(AICommitError):
    """The configuration file could not be created, read or validated."""


class MissingAPIKeyError(ConfigurationError):
    """No DeepSeek API key is configured."""


class GitCommandError(AICommitError):
    """A git invocation exited with a non-zero status."""


class NoStagedChangesError(AICommitError):
    """The index holds no staged changes."""


class RequestConstructionError(AICommitError):
    """The request envelope could not be built or serialized."""


class TransportError(AICommitError):
    """The request could not be delivered (connection, DNS or TLS failure)."""


class NonSuccessStatusError(AICommitError):
    """The endpoint rejected the request.

    ``body`` holds the response body verbatim for diagnostics.
    """

    def __init__(self, status_code: int, body: str):
        super().__init__(f"API failed ({status_code}): {body}")
        self.status_code = status_code
        self.body = body


class StreamReadError(AICommitError):
    """Reading the streamed response body was interrupted."""


class CommitError(AICommitError):
    """Writing the commit to the repository failed."""
