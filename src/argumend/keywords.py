"""Keyword-argument validation with "did you mean" suggestions.

Checks the keyword names of a call against the names a function accepts and
raises UnsupportedKeywordError with ranked suggestions for each unknown name.
The check runs at call time in place of rewriting the function signature; calls
that only use valid names pay one set-membership test per keyword.
"""

import functools
import inspect
import logging
from collections.abc import Callable, Iterable

from .config import get_config
from .consts import NO_CLOSE_MATCH_SUFFIX, UNSUPPORTED_KEYWORD_PREFIX
from .exceptions import ArguMendLoadError, UnsupportedKeywordError
from .matching import extract_close_matches

logger = logging.getLogger("argumend.keywords")

_KEYWORD_KINDS = (
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
    inspect.Parameter.KEYWORD_ONLY,
)


def suggest_keywords(
    name: str,
    valid_names: Iterable[str],
    *,
    n: int | None = None,
    cutoff: float | None = None,
) -> list[str]:
    """Rank the valid names closest to `name`.

    Args:
        name: The unrecognised keyword name.
        valid_names: Names the callee accepts, in declaration order.
        n: Maximum number of suggestions. Defaults to Config.max_suggestions.
        cutoff: Minimum similarity ratio. Defaults to Config.cutoff.

    Returns:
        Up to `n` names, best first.
    """
    config = get_config()
    return extract_close_matches(
        name,
        list(valid_names),
        n=config.max_suggestions if n is None else n,
        cutoff=config.cutoff if cutoff is None else cutoff,
    )


def format_unsupported_keyword(name: str, suggestions: list[str]) -> str:
    """Build the message for one unknown keyword name.

    Example:
        >>> format_unsupported_keyword("kww", ["kw", "kws"])
        "found unsupported keyword argument: 'kww', perhaps you meant 'kw' or 'kws'"
    """
    message = f"{UNSUPPORTED_KEYWORD_PREFIX}: '{name}'"
    if not suggestions:
        return f"{message}, {NO_CLOSE_MATCH_SUFFIX}"

    quoted = [f"'{s}'" for s in suggestions]
    if len(quoted) == 1:
        options = quoted[0]
    else:
        options = f"{', '.join(quoted[:-1])} or {quoted[-1]}"
    return f"{message}, perhaps you meant {options}"


def check_keyword_arguments(
    given: Iterable[str],
    valid_names: Iterable[str],
    *,
    n: int | None = None,
    cutoff: float | None = None,
) -> None:
    """Validate keyword names passed to a call.

    Names that match a valid name exactly are accepted without scoring. Every
    other name is looked up independently, in the order given.

    Args:
        given: Keyword names used at the call site.
        valid_names: Names the callee accepts, in declaration order.
        n: Maximum suggestions per unknown name. Defaults to Config.
        cutoff: Minimum similarity ratio. Defaults to Config.

    Returns:
        None: success is the absence of an exception.

    Raises:
        UnsupportedKeywordError: If any name is not in `valid_names`.
    """
    valid = list(valid_names)
    valid_set = set(valid)
    unsupported = [name for name in given if name not in valid_set]
    if not unsupported:
        return

    errors = []
    all_suggestions = []
    suggestions_by_name = {}
    for name in unsupported:
        suggestions = suggest_keywords(name, valid, n=n, cutoff=cutoff)
        suggestions_by_name[name] = suggestions
        errors.append(format_unsupported_keyword(name, suggestions))
        all_suggestions.extend(s for s in suggestions if s not in all_suggestions)

    logger.warning(f"Rejected unsupported keyword arguments: {unsupported}")
    raise UnsupportedKeywordError(
        get_config().message_separator.join(errors),
        errors=errors,
        suggestions=all_suggestions,
        context={
            "unsupported": unsupported,
            "suggestions_by_name": suggestions_by_name,
        },
    )


def _keyword_names(func: Callable) -> tuple[str, ...]:
    """Names of `func`'s parameters that can be passed by keyword.

    Raises:
        ArguMendLoadError: If there are none, or if the signature has **kwargs.
    """
    parameters = inspect.signature(func).parameters.values()

    if any(p.kind is inspect.Parameter.VAR_KEYWORD for p in parameters):
        raise ArguMendLoadError(
            "syntax error: keyword splatting is not permitted in an "
            "@argumend function definition",
            suggestions=["Remove the **kwargs parameter"],
            context={"function": func.__qualname__},
        )

    names = tuple(p.name for p in parameters if p.kind in _KEYWORD_KINDS)
    if not names:
        raise ArguMendLoadError(
            "syntax error: could not find any keywords in function definition",
            suggestions=["Add a keyword parameter or remove @argumend"],
            context={"function": func.__qualname__},
        )
    return names


def argumend(
    func: Callable | None = None,
    *,
    n: int | None = None,
    cutoff: float | None = None,
) -> Callable:
    """Decorate a function to report mistyped keyword arguments.

    Usable bare or with options:

        @argumend
        def f(*, niterations=10): ...

        @argumend(n=1, cutoff=0.8)
        def g(*, ncycles_per_iteration=100): ...

    Calling `f(niteration=5)` raises UnsupportedKeywordError with the message
    "found unsupported keyword argument: 'niteration', perhaps you meant
    'niterations'".

    Args:
        func: Function to wrap (when used bare).
        n: Maximum suggestions per unknown name. Defaults to Config.
        cutoff: Minimum similarity ratio. Defaults to Config.

    Raises:
        ArguMendLoadError: At decoration time, if the signature has no keyword
            parameters or accepts **kwargs.
    """

    def decorate(fn: Callable) -> Callable:
        names = _keyword_names(fn)
        valid_set = frozenset(names)

        @functools.wraps(fn)
        def wrapper(*args, **kwargs):
            if not valid_set.issuperset(kwargs):
                check_keyword_arguments(kwargs, names, n=n, cutoff=cutoff)
            return fn(*args, **kwargs)

        wrapper.__argumend_keywords__ = valid_set
        logger.debug(f"Wrapped {fn.__qualname__} with keywords {names}")
        return wrapper

    if func is not None:
        return decorate(func)
    return decorate
