"""Allows `python -m survey_api` to start the server."""

from survey_api.main import run

if __name__ == "__main__":
    run()
