"""Contains exceptions raised when reconciling application configuration."""


class GitHubAuthenticationConfigurationUndefinedError(Exception):
    """Raised when the GitHub authentication configuration is undefined or ambiguous."""

    pass


class GitHubClientSetupError(Exception):
    """Raised when an authenticated GitHub client cannot be created from the configuration."""

    pass
