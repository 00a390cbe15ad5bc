"""Essentio application class.

Mutable during setup (route registration, middleware, error handlers,
services). Frozen when the first request is handled.
"""

import inspect
import logging
import threading
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

from essentio._internal.asgi import Receive, Scope, Send, read_body
from essentio._internal.types import CommandHandler, ErrorHandler, Handler, MiddlewareFunc
from essentio.commands import parse_arguments
from essentio.config import AppConfig
from essentio.container import Container
from essentio.context import arguments_var, request_var
from essentio.errors import CommandNotFound, ConfigurationError, HTTPError
from essentio.http.request import Request
from essentio.http.response import Response
from essentio.routing.dispatch import Dispatcher, compose
from essentio.routing.router import Router
from essentio.server.errors import handle_http_error, handle_internal_error
from essentio.server.sender import send_response

if TYPE_CHECKING:
    from kida import Environment

logger = logging.getLogger("essentio.app")


@dataclass(slots=True)
class _PendingRoute:
    """A route waiting to be added to the table."""

    method: str
    path: str
    handler: Handler
    middleware: tuple[MiddlewareFunc, ...]


class App:
    """The essentio application.

    Usage::

        app = App()

        @app.get("user/:id")
        def show_user(request, response):
            return response.with_body(f"User {request.get('id')}")

        response = app.handle(Request.create("GET", "/user/42"))

    Thread safety:
        Setup is single-threaded (decorators at import time). The freeze
        transition uses a Lock + double-check so exactly one thread builds
        the route table, even if several requests arrive at once.
    """

    __slots__ = (
        "_commands",
        "_dispatcher",
        "_error_handlers",
        "_freeze_lock",
        "_frozen",
        "_kida_env",
        "_middleware",
        "_middleware_list",
        "_pending_routes",
        "_pipeline",
        "_router",
        "_shutdown_hooks",
        "_startup_hooks",
        "config",
        "container",
    )

    def __init__(self, config: AppConfig | None = None) -> None:
        self.config: AppConfig = config or AppConfig()
        self.container: Container = Container()
        self._pending_routes: list[_PendingRoute] = []
        self._middleware_list: list[MiddlewareFunc] = []
        self._error_handlers: dict[int | type, ErrorHandler] = {}
        self._startup_hooks: list[Callable[..., Any]] = []
        self._shutdown_hooks: list[Callable[..., Any]] = []
        self._commands: dict[str, CommandHandler] = {}
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

        # Compiled state, set during _freeze()
        self._router: Router | None = None
        self._dispatcher: Dispatcher | None = None
        self._middleware: tuple[MiddlewareFunc, ...] = ()
        self._pipeline: Handler | None = None
        self._kida_env: Environment | None = None

    # -- Route registration --

    def add(
        self,
        method: str,
        path: str,
        handler: Handler,
        middleware: Iterable[MiddlewareFunc] = (),
    ) -> None:
        """Register *handler* for *method* and *path*.

        Path parameters are declared as ``:name`` segments. *middleware*
        runs around the handler, first entry outermost.
        """
        self._check_not_frozen()
        self._pending_routes.append(
            _PendingRoute(method.upper(), path, handler, tuple(middleware))
        )

    def route(
        self,
        path: str,
        *,
        methods: Iterable[str] = ("GET",),
        middleware: Iterable[MiddlewareFunc] = (),
    ) -> Callable[[Handler], Handler]:
        """Register a route handler via decorator.

        One route is added per method, in the order given. A single
        method may be passed as a plain string.
        """
        if isinstance(methods, str):
            methods = (methods,)
        methods = tuple(methods)
        middleware = tuple(middleware)

        def decorator(func: Handler) -> Handler:
            for method in methods:
                self.add(method, path, func, middleware)
            return func

        return decorator

    def get(self, path: str, *, middleware: Iterable[MiddlewareFunc] = ()) -> Callable[[Handler], Handler]:
        """Register a GET route via decorator."""
        return self.route(path, methods=("GET",), middleware=middleware)

    def post(self, path: str, *, middleware: Iterable[MiddlewareFunc] = ()) -> Callable[[Handler], Handler]:
        """Register a POST route via decorator."""
        return self.route(path, methods=("POST",), middleware=middleware)

    def put(self, path: str, *, middleware: Iterable[MiddlewareFunc] = ()) -> Callable[[Handler], Handler]:
        """Register a PUT route via decorator."""
        return self.route(path, methods=("PUT",), middleware=middleware)

    def patch(self, path: str, *, middleware: Iterable[MiddlewareFunc] = ()) -> Callable[[Handler], Handler]:
        """Register a PATCH route via decorator."""
        return self.route(path, methods=("PATCH",), middleware=middleware)

    def delete(self, path: str, *, middleware: Iterable[MiddlewareFunc] = ()) -> Callable[[Handler], Handler]:
        """Register a DELETE route via decorator."""
        return self.route(path, methods=("DELETE",), middleware=middleware)

    # -- Error handlers --

    def error(
        self,
        code_or_exception: int | type[Exception],
    ) -> Callable[[ErrorHandler], ErrorHandler]:
        """Register an error handler for a status code or exception type.

        The handler may take ``()``, ``(request)`` or ``(request, exc)``.
        """

        def decorator(func: ErrorHandler) -> ErrorHandler:
            self._check_not_frozen()
            self._error_handlers[code_or_exception] = func
            return func

        return decorator

    # -- Middleware --

    def add_middleware(self, middleware: MiddlewareFunc) -> None:
        """Add an app-wide middleware.

        App-wide middleware wraps dispatch itself, so it runs for every
        request and sees routing failures raised from inside it.
        """
        self._check_not_frozen()
        self._middleware_list.append(middleware)

    # -- Services --

    def bind(self, key: Any, factory: Callable[[], Any], *, once: bool = False) -> None:
        """Register a service factory on the app's container."""
        self.container.bind(key, factory, once=once)

    def resolve(self, key: Any) -> Any:
        """Return the service bound under *key*."""
        return self.container.resolve(key)

    # -- Lifecycle hooks --

    def on_startup(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Register an async or sync startup hook via decorator.

        Hooks run in registration order during ASGI lifespan startup.
        """
        self._check_not_frozen()
        self._startup_hooks.append(func)
        return func

    def on_shutdown(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Register an async or sync shutdown hook via decorator."""
        self._check_not_frozen()
        self._shutdown_hooks.append(func)
        return func

    # -- Commands --

    def command(self, name: str) -> Callable[[CommandHandler], CommandHandler]:
        """Register a command handler via decorator.

        The handler receives the parsed ``Arguments``. An int return value
        is the exit status; anything else means 0.
        """

        def decorator(func: CommandHandler) -> CommandHandler:
            self._commands[name] = func
            return func

        return decorator

    @property
    def commands(self) -> tuple[str, ...]:
        """Registered command names in registration order."""
        return tuple(self._commands)

    def run_command(self, argv: Sequence[str]) -> int:
        """Parse *argv*, run the matching command and return its exit status.

        Raises ``CommandNotFound`` when no command matches.
        """
        arguments = parse_arguments(argv)
        handler = self._commands.get(arguments.command)
        if handler is None:
            raise CommandNotFound(arguments.command, self.commands)

        logger.debug("Running command %s", arguments.command)
        token = arguments_var.set(arguments)
        try:
            result = handler(arguments)
        finally:
            arguments_var.reset(token)

        if isinstance(result, int) and not isinstance(result, bool):
            return result
        return 0

    # -- Paths and templates --

    def from_base(self, path: str) -> Path:
        """Resolve *path* against ``config.base_path``."""
        return Path(self.config.base_path) / path

    @property
    def kida_env(self) -> "Environment":
        """The kida Environment, created on first use."""
        if self._kida_env is None:
            from essentio.templating.integration import create_environment

            self._kida_env = create_environment(self.config)
        return self._kida_env

    def view(self, name: str, context: dict[str, Any] | None = None, status: int = 200) -> Response:
        """Render template *name* into an HTML response."""
        from essentio.templating.integration import render

        return Response(body=render(self.kida_env, name, context), status=status)

    # -- Introspection --

    @property
    def router(self) -> Router:
        """The frozen route table."""
        self._ensure_frozen()
        assert self._router is not None
        return self._router

    # -- Request handling --

    def handle(self, request: Request) -> Response:
        """Run *request* through middleware and dispatch.

        Always returns a response: routing failures and other HTTP
        errors become error responses, anything else becomes a 500.
        """
        self._ensure_frozen()
        assert self._pipeline is not None
        assert self._dispatcher is not None

        token = request_var.set(request)
        try:
            response = self._pipeline(request, self._dispatcher.default_response)
        except HTTPError as exc:
            response = handle_http_error(exc, request, self._error_handlers)
        except Exception as exc:
            response = handle_internal_error(exc, request, self._error_handlers, self.config.debug)
        finally:
            request_var.reset(token)
        return response

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point.

        Handles lifespan directly and runs HTTP scopes through ``handle``.
        Dispatch itself is synchronous; only body collection and sending
        await.
        """
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        if scope["type"] != "http":
            return

        body = await read_body(receive)
        response = self.handle(Request.from_asgi(scope, body))
        await send_response(response, send)

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol.

        Freezes the app at startup (before the first HTTP request), then
        runs registered startup/shutdown hooks and signals completion
        back to the server.
        """
        self._ensure_frozen()

        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    for hook in self._startup_hooks:
                        result = hook()
                        if inspect.isawaitable(result):
                            await result
                    await send({"type": "lifespan.startup.complete"})
                except Exception as exc:
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return

            elif msg_type == "lifespan.shutdown":
                for hook in self._shutdown_hooks:
                    result = hook()
                    if inspect.isawaitable(result):
                        await result
                await send({"type": "lifespan.shutdown.complete"})
                return

    # -- Internal --

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._freeze()

    def _freeze(self) -> None:
        """Build the route table and the app-wide pipeline.

        MUST only be called while holding _freeze_lock.
        """
        router = Router()
        for pending in self._pending_routes:
            router.add(pending.method, pending.path, pending.handler, pending.middleware)
        self._router = router

        dispatcher = Dispatcher(router)
        self._dispatcher = dispatcher
        self._middleware = tuple(self._middleware_list)
        self._pipeline = compose(dispatcher.dispatch, self._middleware)

        self._frozen = True
        logger.debug(
            "Frozen with %d route(s) and %d app middleware", len(router), len(self._middleware)
        )

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the app after it has started handling requests. "
                "Register routes, middleware, and error handlers first."
            )
            raise ConfigurationError(msg)
