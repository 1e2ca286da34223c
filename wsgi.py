"""WSGI entry point for the Airgead planner application."""

import os
import sys

from airgead import create_app

app = create_app()

if __name__ == "__main__":
    # PORT environment variable first, then a --port argument
    port = int(os.environ.get("PORT", 5000))
    if len(sys.argv) > 2 and sys.argv[1] == "--port":
        port = int(sys.argv[2])

    debug = os.environ.get("APP_ENV", "development") == "development"
    app.run(debug=debug, host="0.0.0.0", port=port)
