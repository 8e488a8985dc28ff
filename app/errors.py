class ConfigurationError(Exception):
    """Required configuration is missing; the service must not start."""


class ProviderError(Exception):
    """The upstream model call failed or returned an unusable envelope."""


class RecipeExtractionFailure(Exception):
    """The fenced recipe block could not be turned into a recipe."""
