"""spaserve — serve a single-page application's HTML over ASGI.

Returns the cached index document for ``/`` and the cached 404 document
for every other path.  Both are read once at startup.

Basic usage::

    from spaserve import ServeConfig, serve

    serve(ServeConfig.from_env(root="/srv/app"))
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "Documents",
    "ListenBindFailure",
    "Response",
    "SPAHandler",
    "ServeConfig",
    "SpaServeError",
    "StartupLoadFailure",
    "create_handler",
    "load_documents",
    "serve",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import spaserve`` fast and pounce unimported until serving.
    """
    if name == "ServeConfig":
        from spaserve.config import ServeConfig

        return ServeConfig

    if name in ("Documents", "load_documents"):
        from spaserve import documents as _documents

        return getattr(_documents, name)

    if name == "Response":
        from spaserve.http.response import Response

        return Response

    if name == "SPAHandler":
        from spaserve.server.handler import SPAHandler

        return SPAHandler

    if name in ("create_handler", "serve"):
        from spaserve.server import listener as _listener

        return getattr(_listener, name)

    if name in ("ConfigurationError", "ListenBindFailure", "SpaServeError", "StartupLoadFailure"):
        from spaserve import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
