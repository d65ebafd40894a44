"""
rxlog - REST API Server
Thin launcher for the Flask app in rxlog.api.app.
"""

from rxlog.api.app import main

if __name__ == "__main__":
    main()
