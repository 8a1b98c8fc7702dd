"""Error context helpers."""

from .context import ExceptionContext, describe_exception

__all__ = ['ExceptionContext', 'describe_exception']
