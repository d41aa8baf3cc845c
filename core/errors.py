class FreepikMCPError(Exception):
    """Base class for every error raised by this server."""


class MissingApiKeyError(FreepikMCPError):
    def __init__(self, variable: str) -> None:
        self.variable = variable
        super().__init__(f"{variable} environment variable is required")


class UnknownToolError(FreepikMCPError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class ToolInputError(FreepikMCPError):
    """Arguments rejected locally, before any upstream request."""

    def __init__(self, tool: str, problems: list[str]) -> None:
        self.tool = tool
        self.problems = problems
        super().__init__(f"Invalid arguments for {tool}: {'; '.join(problems)}")


class UpstreamError(FreepikMCPError):
    """The Freepik API could not be reached or answered with an error."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class InvalidSettingError(FreepikMCPError):
    def __init__(self, variable: str, value: str, reason: str) -> None:
        self.variable = variable
        self.value = value
        super().__init__(f"{variable}={value!r} is invalid: {reason}")
