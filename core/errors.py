"""Errors raised while configuring or generating identifiers."""

from utils.timestamp import format_timestamp


class BaseTempoError(Exception):
    """Base error carrying a timestamp and context for tracking."""
    
    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause

    def to_dict(self):
        record = {"type": type(self).__name__, "msg": str(self), "timestamp": self.timestamp, **self.context}
        if self.cause is not None:
            record["cause"] = repr(self.cause)
        return record


class InvalidAlphabetError(BaseTempoError, ValueError):
    """Alphabet cannot be used for encoding or sampling."""
    
    def __init__(self, message, alphabet=None, **kwargs):
        context = kwargs.pop("context", {})
        if alphabet is not None:
            context["alphabet"] = alphabet
            context["alphabet_size"] = len(alphabet)
        super().__init__(message, context=context, **kwargs)


class ConfigurationError(BaseTempoError, ValueError):
    """Generation options out of range."""
    
    def __init__(self, message, field=None, **kwargs):
        context = kwargs.pop("context", {})
        if field:
            context["field"] = field
        super().__init__(message, context=context, **kwargs)


class EntropyError(BaseTempoError):
    """Secure random source failed to supply bytes."""
    
    def __init__(self, message, requested=None, **kwargs):
        context = kwargs.pop("context", {})
        if requested is not None:
            context["requested"] = requested
        super().__init__(message, context=context, **kwargs)
