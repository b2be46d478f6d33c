"""Endpoint Declarations — explicit call descriptors for service interfaces.

A service interface is an ApiService subclass whose class attributes are
Endpoint descriptors:

    class FavoriteService(ApiService):
        list = Endpoint("GET", "/1.1/favorites/list.json",
                        query=("user_id", "count"), response=list[Tweet])

    service.list(count=5)   # -> executor.execute(PreparedCall(...))

Invariants:
    - Path parameters are the {placeholders} of the path template and are always required
    - A parameter name is declared in exactly one place (path, query, form or files)
    - File parameters only on POST (multipart); form parameters only on POST/PUT
    - Binding never touches the network: Endpoint.bind() is pure
    - None-valued arguments are dropped; booleans render as true/false; sequences comma-join
    - A fixed query in the path template ("/x.json?a=b") moves into PreparedCall.query,
      ahead of the bound query arguments; PreparedCall.path never carries a query

Design Decisions:
    - Descriptors over runtime proxies: every endpoint visible where the service is defined
    - check_service_definition() validates the whole class up front so a malformed
      interface fails at creation, never at first call
    - Bad call arguments raise TypeError, matching plain Python function calls
"""

import string
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol
from urllib.parse import parse_qsl, quote

from twitter_core.core.errors import ConfigurationError


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


_BODY_METHODS = frozenset({HttpMethod.POST, HttpMethod.PUT})


@dataclass(frozen=True)
class PreparedCall:
    """One fully-bound request, ready for the transport."""
    service: str
    endpoint: str
    method: str
    path: str
    host: str | None = None
    query: list[tuple[str, str]] = field(default_factory=list)
    form: list[tuple[str, str]] = field(default_factory=list)
    files: dict[str, Any] = field(default_factory=dict)
    response: Any = None


class CallExecutor(Protocol):
    def execute(self, call: PreparedCall) -> Any: ...


def render_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(render_value(v) for v in value)
    return str(value)


def template_fields(path: str) -> tuple[str, ...]:
    """Placeholder names of a path template, in order. Raises ValueError on bad syntax."""
    names = []
    for _, name, spec, conversion in string.Formatter().parse(path):
        if name is None:
            continue
        if not name.isidentifier() or spec or conversion:
            raise ValueError(f"unsupported placeholder '{{{name}}}'")
        names.append(name)
    return tuple(names)


@dataclass(frozen=True)
class Endpoint:
    """Declared remote call: verb, path template, parameter bindings, response shape."""
    method: str
    path: str
    query: tuple[str, ...] = ()
    form: tuple[str, ...] = ()
    files: tuple[str, ...] = ()
    required: tuple[str, ...] = ()
    response: Any = None
    host: str | None = None  # symbolic host ("upload") or absolute base URL
    name: str = field(default="", compare=False)

    def __set_name__(self, owner: type, name: str) -> None:
        object.__setattr__(self, "name", name)

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return BoundEndpoint(self, instance)

    @property
    def path_params(self) -> tuple[str, ...]:
        return template_fields(self.path)

    @property
    def parameters(self) -> tuple[str, ...]:
        return (*self.path_params, *self.query, *self.form, *self.files)

    def bind(self, service: str, arguments: dict[str, Any]) -> PreparedCall:
        """Bind keyword arguments into a PreparedCall."""
        label = f"{service}.{self.name}" if self.name else service
        unknown = set(arguments) - set(self.parameters)
        if unknown:
            raise TypeError(
                f"{label}() got an unexpected keyword argument '{sorted(unknown)[0]}'",
            )
        for required in (*self.path_params, *self.required):
            if arguments.get(required) is None:
                raise TypeError(f"{label}() missing required argument: '{required}'")

        template, _, fixed_query = self.path.partition("?")
        path = template.format(**{
            p: quote(render_value(arguments[p]), safe="") for p in self.path_params
        })
        return PreparedCall(
            service=service,
            endpoint=self.name,
            method=self.method,
            path=path,
            host=self.host,
            query=[
                *parse_qsl(fixed_query, keep_blank_values=True),
                *_pairs(self.query, arguments),
            ],
            form=_pairs(self.form, arguments),
            files={k: arguments[k] for k in self.files if arguments.get(k) is not None},
            response=self.response,
        )


def _pairs(names: tuple[str, ...], arguments: dict[str, Any]) -> list[tuple[str, str]]:
    return [
        (n, render_value(arguments[n])) for n in names
        if arguments.get(n) is not None
    ]


class BoundEndpoint:
    """Endpoint bound to a service instance; calling it performs the request."""

    __slots__ = ("_endpoint", "_service")

    def __init__(self, endpoint: Endpoint, service: "ApiService"):
        self._endpoint = endpoint
        self._service = service

    def __call__(self, **arguments: Any) -> Any:
        call = self._endpoint.bind(type(self._service).__name__, arguments)
        return self._service._executor.execute(call)

    def __repr__(self) -> str:
        ep = self._endpoint
        return f"<endpoint {type(self._service).__name__}.{ep.name} {ep.method} {ep.path}>"


class ApiService:
    """Base for declared service interfaces. Instances are stateless proxies."""

    def __init__(self, executor: CallExecutor):
        self._executor = executor

    @classmethod
    def endpoints(cls) -> dict[str, Endpoint]:
        found: dict[str, Endpoint] = {}
        for klass in reversed(cls.__mro__):
            for attr, value in vars(klass).items():
                if isinstance(value, Endpoint):
                    found[attr] = value
        return found


# ─── Definition checks ───────────────────────────────────────────

def check_service_definition(service_type: Any) -> dict[str, Endpoint]:
    """Validate a service class against the declaration convention.

    Returns the endpoint table. Raises ConfigurationError on the first violation.
    """
    if not isinstance(service_type, type) or not issubclass(service_type, ApiService):
        raise ConfigurationError(
            f"{service_type!r} is not an ApiService subclass", service_type,
        )
    endpoints = service_type.endpoints()
    if not endpoints:
        raise ConfigurationError(
            f"{service_type.__name__} declares no endpoints", service_type,
        )
    for attr, endpoint in endpoints.items():
        problem = _endpoint_problem(endpoint)
        if problem:
            raise ConfigurationError(
                f"{service_type.__name__}.{attr}: {problem}", service_type,
            )
    return endpoints


def _endpoint_problem(endpoint: Endpoint) -> str | None:
    try:
        method = HttpMethod(endpoint.method)
    except ValueError:
        return f"unsupported HTTP method '{endpoint.method}'"
    if not endpoint.path.startswith("/"):
        return f"path '{endpoint.path}' must start with '/'"
    try:
        path_params = template_fields(endpoint.path)
    except ValueError as e:
        return f"bad path template '{endpoint.path}': {e}"
    if endpoint.host is not None and not (
        endpoint.host.isidentifier()
        or endpoint.host.startswith(("http://", "https://"))
    ):
        return f"host '{endpoint.host}' must be a host name or an absolute http(s) URL"

    declared = [*path_params, *endpoint.query, *endpoint.form, *endpoint.files]
    duplicates = sorted({p for p in declared if declared.count(p) > 1})
    if duplicates:
        return f"parameter '{duplicates[0]}' declared more than once"
    bad_names = [p for p in declared if not p.isidentifier()]
    if bad_names:
        return f"parameter '{bad_names[0]}' is not a valid identifier"
    undeclared = sorted(set(endpoint.required) - set(declared))
    if undeclared:
        return f"required parameter '{undeclared[0]}' is not declared"
    if endpoint.form and method not in _BODY_METHODS:
        return f"form parameters are not allowed on {method.value}"
    if endpoint.files and method is not HttpMethod.POST:
        return f"file parameters require POST, not {method.value}"
    return None
