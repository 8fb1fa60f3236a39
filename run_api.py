#!/usr/bin/env python
"""Development server entrypoint for the habitlog API."""

from habitlog import create_app

if __name__ == "__main__":
    create_app("development").run(debug=True)
