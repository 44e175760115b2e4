"""Configuration exceptions.

Raised before any scanning starts. A configuration error aborts the whole run.
"""

from compscan.domain.exceptions.base import CompScanError


class ConfigurationError(CompScanError):
    """Invalid discovery configuration.

    Attributes:
        reason: Why configuration is invalid (must not be empty)
    """

    def __init__(self, reason: str) -> None:
        # FAIL-FIRST validation
        if not reason:
            raise ValueError("reason must not be empty")

        self.reason = reason
        super().__init__(f"Invalid configuration: {reason}")


class StrategyValidationError(ConfigurationError):
    """Strategy descriptor is missing a required parameter.

    Attributes:
        strategy_name: Name of the offending strategy
        key: Missing parameter key
    """

    def __init__(self, strategy_name: str, key: str, kind: str | None = None) -> None:
        # FAIL-FIRST validation
        if not strategy_name:
            raise ValueError("strategy_name must not be empty")
        if not key:
            raise ValueError("key must not be empty")

        self.strategy_name = strategy_name
        self.key = key
        self.kind = kind

        suffix = f" for {kind} strategy" if kind else ""
        super().__init__(f"strategy '{strategy_name}': '{key}' is required{suffix}")


class DuplicateComponentError(ConfigurationError):
    """Two declared components share a name inside one container.

    Attributes:
        container: Container key the component list belongs to
        component_name: Duplicated component name
    """

    def __init__(self, container: str, component_name: str) -> None:
        # FAIL-FIRST validation
        if not container:
            raise ValueError("container must not be empty")
        if not component_name:
            raise ValueError("component_name must not be empty")

        self.container = container
        self.component_name = component_name
        super().__init__(
            f"container '{container}' declares component '{component_name}' more than once"
        )
