#!/usr/bin/env python
"""Development server entrypoint for the catalog API."""

from catalog_api import create_app

app = create_app()

if __name__ == "__main__":
    app.run(debug=app.config.get("DEBUG", False))
