"""Custom exceptions and warnings for pyschemaannotate."""


class SchematicError(Exception):
    """
    Base class for all schematic processing errors.

    Catch this to handle any failure raised by the parser, the analyzer
    or the annotation tools in one place.
    """

    pass


class SchematicFormatError(SchematicError):
    """Raised when a component block cannot be parsed at all."""

    def __init__(self, reason: str, line: str | None = None):
        self.reason = reason
        self.line = line
        msg = f"Invalid component block: {reason}"
        if line is not None:
            msg += f" (got {line!r})"
        super().__init__(msg)


class StaleAnalysisError(SchematicError):
    """Raised when derived conflict state is read after an unanalyzed mutation."""

    def __init__(self, attribute: str = "problems"):
        self.attribute = attribute
        super().__init__(
            f"'{attribute}' is stale: the schematic was modified since the last "
            f"analysis. Call analyze() before reading it."
        )


class ComponentIndexError(SchematicError):
    """Raised when a component cannot be correlated with its source block."""

    def __init__(self, index: int, count: int, found: int | None = None):
        self.index = index
        self.count = count
        self.found = found
        if found is None:
            msg = (
                f"Component index {index} is out of bounds. "
                f"Valid indices: 0-{count - 1}"
            )
        else:
            msg = (
                f"Component at position {index} carries component_index "
                f"{found}; the component list was reordered."
            )
        super().__init__(msg)


class UnknownStrategyError(SchematicError, ValueError):
    """Raised in strict mode when a strategy selector is not recognized."""

    def __init__(self, strategy: str, valid: tuple[str, ...]):
        self.strategy = strategy
        self.valid = valid
        super().__init__(
            f"Unknown strategy '{strategy}'. Valid strategies: {list(valid)}"
        )


class SchematicFormatWarning(RuntimeWarning):
    """Emitted for recoverable structural problems in the schematic text."""

    pass
