"""Single-page app — the built shell at ``/``, a custom 404 elsewhere.

Serves ``dist/index.html`` and ``static/404.html`` from this directory.
Client-side routing lives in the shell; the server only knows ``/``.

Run:
    PORT=3000 python app.py
"""

from pathlib import Path

from spaserve import ServeConfig, create_handler

ROOT = Path(__file__).parent

config = ServeConfig.from_env(root=ROOT)
app = create_handler(config)

if __name__ == "__main__":
    import logging

    from spaserve.server.listener import run_server

    logging.basicConfig(level=logging.INFO)
    run_server(app, config)
