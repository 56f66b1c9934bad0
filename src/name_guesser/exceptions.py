from typing import Any, Dict, List, Optional


class NameGuesserError(Exception):
    """Base exception for all name_guesser errors."""

    def __init__(
        self,
        message: str,
        *,
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.context: Dict[str, Any] = context or {}
        self.suggestions: List[str] = suggestions or []

    def add_context(self, key: str, value: Any) -> "NameGuesserError":
        if key:
            self.context[key] = value
        return self

    def add_suggestion(self, suggestion: str) -> "NameGuesserError":
        if suggestion:
            self.suggestions.append(suggestion)
        return self

    def __str__(self) -> str:
        base = self.message or ""
        if self.suggestions:
            return f"{base} -- Suggestions: {'; '.join(self.suggestions)}"
        return base


class ConfigurationError(NameGuesserError):
    def __init__(self, message: str, *, config_field: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.config_field = config_field


class DataSourceError(NameGuesserError):
    """A name data source could not be read."""

    def __init__(self, message: str, *, source: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.source = source
        if source:
            self.add_context("source", source)


class AnswerValidationError(NameGuesserError):
    """Quiz answers failed validation at the engine boundary."""

    def __init__(self, message: str, *, question: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.question = question


class PredictorError(NameGuesserError):
    pass
